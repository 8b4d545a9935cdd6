from dataclasses import dataclass

from .search_node import SearchNode


@dataclass(frozen=True)
class UniformCostNode(SearchNode):
    """
    Wraps a node so that its heuristic is always zero, turning A* into a
    uniform-cost (Dijkstra) search over the same graph.

    :param node: The underlying node.
    """

    node: SearchNode

    def heuristic(self):
        return 0

    def successors(self):
        for weight, child in self.node.successors():
            yield weight, UniformCostNode(child)

    def is_end(self):
        return self.node.is_end()

    def unwrap(self):
        return self.node
