import logging
from typing import Callable, Hashable, List, Optional, Sequence, TypeVar

from bestfirst.search_node.search_node import SearchNode

from .astar_search import Found, solve

S = TypeVar("S", bound=Hashable)

logger = logging.getLogger(__name__)


def solve_from_any(
    starts: Sequence[S],
    make_node: Callable[[S], SearchNode],
    key: Optional[Callable[[SearchNode], S]] = None,
) -> Optional[Found]:
    """
    Finds the cheapest path to an end node from any of several start points, by
    searching from each one in turn.

    Whenever a search is exhausted, every remaining start point found in its
    visited set is dropped, as its reachable set lies inside the exhausted one and
    so cannot contain an end node either.

    :param starts: Candidate start points. These are tried last first.
    :param make_node: Builds the search node for a start point.
    :param key: Maps a visited node back to a start point. Defaults to the
        identity, i.e., the start points are the nodes themselves.
    :return: The cheapest ``Found`` result, or None if no start reaches an end node.
    """
    if key is None:
        key = lambda node: node  # pylint: disable=unnecessary-lambda-assignment
    remaining: List[S] = list(starts)
    best = None
    while remaining:
        start = remaining.pop()
        result = solve(make_node(start))
        if isinstance(result, Found):
            if best is None or result.cost < best.cost:
                best = result
            continue
        visited = {key(node) for node in result.visited}
        before = len(remaining)
        remaining = [s for s in remaining if s not in visited]
        logger.debug(
            "start %r unreachable, pruned %d of %d remaining starts",
            start,
            before - len(remaining),
            before,
        )
    return best
