import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Generic, Tuple, TypeVar, Union

from bestfirst.search_node.search_node import SearchNode

from .frontier import Frontier
from .scored_entry import ScoredEntry

X = TypeVar("X")
Y = TypeVar("Y")

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Found(Generic[X]):
    """
    The result of a search that reached an end node.

    :param cost: The minimum total cost of reaching an end node.
    :param path: One minimum-cost path, from the start node to the end node inclusive.
    :param expanded: The number of nodes that were expanded.
    """

    cost: int
    path: Tuple[X, ...]
    expanded: int = 0

    @property
    def end(self) -> X:
        return self.path[-1]

    def map_path(self, fn: Callable[[X], Y]) -> "Found[Y]":
        return Found(self.cost, tuple(fn(x) for x in self.path), self.expanded)

    def __bool__(self):
        return True


@dataclass(frozen=True)
class Exhausted(Generic[X]):
    """
    The result of a search whose frontier ran out before any end node was reached.

    :param visited: Every node that was expanded. This is exactly the set of nodes
        reachable from the start node.
    """

    visited: FrozenSet[X]

    @property
    def expanded(self) -> int:
        return len(self.visited)

    def map_visited(self, fn: Callable[[X], Y]) -> "Exhausted[Y]":
        return Exhausted(frozenset(fn(x) for x in self.visited))

    def __bool__(self):
        return False


SearchResult = Union[Found[X], Exhausted[X]]


def solve(start: SearchNode) -> SearchResult:
    """
    Performs an A* search from the given node, returning the cheapest path to any
    end node. Requires that edge weights be non-negative and that the heuristic
    never overestimate the remaining cost; otherwise the path may not be optimal.

    An unreachable goal is not an error: the search returns ``Exhausted`` holding
    every node it expanded, which callers can use to rule out other start nodes.
    Nodes are expanded at most once, and ``successors`` is called only on
    expansion.

    :param start: The node to search from.
    """
    frontier = Frontier()
    frontier.push_or_improve(ScoredEntry.initial(start))
    visited = set()

    while True:
        entry = frontier.pop_min()
        if entry is None:
            logger.debug("search exhausted after expanding %d nodes", len(visited))
            return Exhausted(frozenset(visited))
        if entry.node.is_end():
            logger.debug(
                "found path of cost %d after expanding %d nodes",
                entry.cost,
                len(visited),
            )
            return Found(entry.cost, entry.path, len(visited))
        visited.add(entry.node)
        for weight, child in entry.node.successors():
            if child in visited:
                continue
            frontier.push_or_improve(entry.extend(weight, child))
