from .search_node import SearchNode
from .uniform_cost_node import UniformCostNode
