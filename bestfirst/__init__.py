from bestfirst.search_node.search_node import SearchNode
from bestfirst.search_node.uniform_cost_node import UniformCostNode

from . import examples, search
from .search.astar_search import Exhausted, Found, solve
from .search.multi_source import solve_from_any
