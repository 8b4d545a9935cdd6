import heapq
import itertools
from typing import Dict, Generic, List, Optional, TypeVar

from .scored_entry import ScoredEntry

X = TypeVar("X")


class Frontier(Generic[X]):
    """
    The open set of an A* search: a min-priority queue of ``ScoredEntry`` objects,
    keyed by node, supporting decrease-key.

    Decrease-key is simulated by lazy deletion. Each node's authoritative entry is
    kept in a dictionary; when an entry is improved, the old one stays in the heap
    and is skipped when it is eventually popped.
    """

    def __init__(self) -> None:
        self._heap: List[ScoredEntry[X]] = []
        self._best: Dict[X, ScoredEntry[X]] = {}
        self._counter = itertools.count()

    def push_or_improve(self, entry: ScoredEntry[X]) -> bool:
        """
        Insert the entry if its node is not in the frontier, or replace the existing
        entry if this one has a strictly lower estimate. Otherwise the frontier is
        left as is.

        :return: Whether the entry was added.
        """
        current = self._best.get(entry.node)
        if current is not None and current.estimate <= entry.estimate:
            return False
        entry = entry.with_sequence(next(self._counter))
        self._best[entry.node] = entry
        heapq.heappush(self._heap, entry)
        return True

    def pop_min(self) -> Optional[ScoredEntry[X]]:
        """
        Remove and return the live entry with the smallest estimate, or None if the
        frontier is empty.
        """
        while self._heap:
            entry = heapq.heappop(self._heap)
            if self._best.get(entry.node) is entry:
                del self._best[entry.node]
                return entry
        return None

    def __contains__(self, node) -> bool:
        return node in self._best

    def __len__(self) -> int:
        return len(self._best)

    def __bool__(self) -> bool:
        return bool(self._best)
