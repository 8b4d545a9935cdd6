from abc import ABC, abstractmethod
from typing import Iterable, Tuple, TypeVar

N = TypeVar("N", bound="SearchNode")


class SearchNode(ABC):
    """
    Represents a single vertex of a domain's state graph. Edges are produced by
    the node itself, weighted with non-negative integers.

    Subclasses must be hashable, with two structurally equal nodes comparing equal,
    since the search uses them as dictionary keys. A frozen dataclass is the usual
    way to get this; shared context such as a map should be declared with
    ``field(compare=False)`` so it does not take part in equality.
    """

    @abstractmethod
    def heuristic(self) -> int:
        """
        A lower bound on the remaining cost from this node to any end node. Must
        be non-negative, and must never overestimate for the search to be optimal.
        """

    @abstractmethod
    def successors(self: N) -> Iterable[Tuple[int, N]]:
        """
        All edges out of this node, as ``(weight, next_node)`` pairs. Must be finite.
        """

    @abstractmethod
    def is_end(self) -> bool:
        """
        Return True iff the node is an end (goal) node.
        """
