from . import blizzard_basin, grid, height_map, weighted_graph
from .grid import Direction, Position
from .weighted_graph import GraphNode, WeightedGraph
