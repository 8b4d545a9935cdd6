import unittest

from parameterized import parameterized

import bestfirst as bf
from tests.utils import dijkstra, random_edges

# 1, 2, 3 form a cycle with no goal; 6 -> 4 -> 5 leads to the goal
graph = bf.examples.WeightedGraph.from_edges(
    [(1, 2, 1), (2, 3, 1), (3, 1, 1), (4, 5, 2), (6, 4, 1)],
    goals=[5],
)


class TestSolveFromAny(unittest.TestCase):
    def test_prunes_exhausted_component(self):
        searched = []

        def make_node(v):
            searched.append(v)
            return graph.node(v)

        result = bf.solve_from_any(
            [6, 4, 2, 3, 1], make_node, key=lambda node: node.vertex
        )
        self.assertEqual(result.cost, 2)
        self.assertEqual([node.vertex for node in result.path], [4, 5])
        self.assertEqual(searched, [1, 4, 6])

    def test_default_key_is_identity(self):
        starts = [graph.node(v) for v in [6, 2, 1]]
        searched = []

        def make_node(node):
            searched.append(node.vertex)
            return node

        result = bf.solve_from_any(starts, make_node)
        self.assertEqual(result.cost, 3)
        self.assertEqual(searched, [1, 6])

    def test_none_reachable(self):
        self.assertIsNone(bf.solve_from_any([1, 2, 3], graph.node, lambda n: n.vertex))

    def test_empty(self):
        self.assertIsNone(bf.solve_from_any([], graph.node))

    @parameterized.expand([(seed,) for seed in range(10)])
    def test_matches_dijkstra_from_all_sources(self, seed):
        edges = random_edges(seed, edge_prob=0.1)
        goals = [11]
        g = bf.examples.WeightedGraph.from_edges(edges, goals)
        starts = list(range(11))
        result = bf.solve_from_any(starts, g.node, key=lambda node: node.vertex)
        dist = dijkstra(edges, starts)
        if 11 not in dist:
            self.assertIsNone(result)
        else:
            self.assertEqual(result.cost, dist[11])
