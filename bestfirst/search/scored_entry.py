from dataclasses import dataclass, field, replace
from typing import Generic, Tuple, TypeVar

X = TypeVar("X")


@dataclass(order=True, frozen=True)
class ScoredEntry(Generic[X]):
    """
    Represents a node in the A* search tree, along with the cost and path that were
    taken to reach it.

    Entries are ordered by ``estimate``, the accumulated cost plus the node's
    heuristic, and then by ``sequence``, which the frontier assigns on insertion.
    Two entries occupy the same frontier slot iff their nodes are equal.

    :param estimate: ``cost + node.heuristic()``.
    :param sequence: Insertion order, used to break ties between equal estimates.
    :param cost: Accumulated cost from the start node.
    :param node: The node this entry reaches.
    :param path: All nodes from the start to ``node``, inclusive.
    """

    estimate: int
    sequence: int
    cost: int = field(compare=False)
    node: X = field(compare=False)
    path: Tuple[X, ...] = field(compare=False, repr=False)

    @classmethod
    def initial(cls, node: X) -> "ScoredEntry[X]":
        return cls.create(0, node, (node,))

    @classmethod
    def create(cls, cost: int, node: X, path: Tuple[X, ...]) -> "ScoredEntry[X]":
        return cls(cost + node.heuristic(), 0, cost, node, path)

    def extend(self, weight: int, node: X) -> "ScoredEntry[X]":
        """
        The entry reached by following an edge of the given weight from this one.
        """
        return ScoredEntry.create(self.cost + weight, node, self.path + (node,))

    def with_sequence(self, sequence: int) -> "ScoredEntry[X]":
        return replace(self, sequence=sequence)
