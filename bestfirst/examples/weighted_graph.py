from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Hashable, Iterable, Optional, Tuple

from frozendict import frozendict

from bestfirst.search_node.search_node import SearchNode


@dataclass(frozen=True)
class WeightedGraph:
    """
    An explicit directed graph with non-negative integer edge weights.

    :param edges: For each vertex, its outgoing ``(weight, vertex)`` edges.
    :param goals: The vertices that count as end nodes.
    :param heuristics: Heuristic value for each vertex. Missing vertices get 0.
    """

    edges: Dict[Hashable, Tuple[Tuple[int, Hashable], ...]]  # actually a frozendict
    goals: FrozenSet[Hashable]
    heuristics: Dict[Hashable, int] = field(default_factory=frozendict)

    def __post_init__(self):
        for src, out in self.edges.items():
            for weight, dst in out:
                if weight < 0:
                    raise ValueError(
                        f"Edge {src!r} -> {dst!r} has negative weight {weight}"
                    )
        for vertex, h in self.heuristics.items():
            if h < 0:
                raise ValueError(f"Vertex {vertex!r} has negative heuristic {h}")

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[Tuple[Hashable, Hashable, int]],
        goals: Iterable[Hashable],
        heuristics: Optional[Dict[Hashable, int]] = None,
    ) -> "WeightedGraph":
        """
        Build a graph from ``(source, destination, weight)`` triples.
        """
        out = defaultdict(list)
        for src, dst, weight in edges:
            out[src].append((weight, dst))
        return cls(
            frozendict({src: tuple(dsts) for src, dsts in out.items()}),
            frozenset(goals),
            frozendict(heuristics or {}),
        )

    def vertices(self) -> FrozenSet[Hashable]:
        result = set(self.edges)
        for out in self.edges.values():
            result.update(dst for _, dst in out)
        return frozenset(result | self.goals)

    def node(self, vertex: Hashable) -> "GraphNode":
        return GraphNode(self, vertex)


@dataclass(frozen=True)
class GraphNode(SearchNode):
    graph: WeightedGraph = field(compare=False, repr=False)
    vertex: Hashable

    def heuristic(self):
        return self.graph.heuristics.get(self.vertex, 0)

    def successors(self):
        for weight, dst in self.graph.edges.get(self.vertex, ()):
            yield weight, GraphNode(self.graph, dst)

    def is_end(self):
        return self.vertex in self.graph.goals
