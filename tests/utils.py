import heapq
from collections import Counter, defaultdict
from dataclasses import dataclass, field

import numpy as np

import bestfirst as bf


def random_edges(seed, num_vertices=12, edge_prob=0.25, max_weight=9):
    rng = np.random.RandomState(seed)
    edges = []
    for src in range(num_vertices):
        for dst in range(num_vertices):
            if src != dst and rng.rand() < edge_prob:
                edges.append((src, dst, int(rng.randint(0, max_weight + 1))))
    return edges


def dijkstra(edges, sources):
    """
    Brute force shortest distances from any of the sources, following edges forward.
    """
    out = defaultdict(list)
    for src, dst, weight in edges:
        out[src].append((weight, dst))
    dist = {}
    fringe = [(0, s) for s in sources]
    heapq.heapify(fringe)
    while fringe:
        d, v = heapq.heappop(fringe)
        if v in dist:
            continue
        dist[v] = d
        for weight, dst in out[v]:
            if dst not in dist:
                heapq.heappush(fringe, (d + weight, dst))
    return dist


def distances_to(edges, goals):
    return dijkstra([(dst, src, weight) for src, dst, weight in edges], goals)


def scaled_heuristics(edges, goals, divisor):
    """
    The exact remaining distance divided (rounding down) by ``divisor``, which is
    admissible and consistent. Vertices that cannot reach a goal get 0.
    """
    return {v: d // divisor for v, d in distances_to(edges, goals).items()}


def path_cost(edges, path):
    weights = {(src, dst): weight for src, dst, weight in edges}
    return sum(weights[a, b] for a, b in zip(path, path[1:]))


@dataclass(frozen=True)
class CountingNode(bf.SearchNode):
    """
    Wraps a node, counting how many times each underlying node is expanded.
    """

    node: bf.SearchNode
    counts: Counter = field(compare=False, repr=False)

    def heuristic(self):
        return self.node.heuristic()

    def successors(self):
        self.counts[self.node] += 1
        for weight, child in self.node.successors():
            yield weight, CountingNode(child, self.counts)

    def is_end(self):
        return self.node.is_end()


def vertices_of(path):
    return [node.vertex for node in path]
