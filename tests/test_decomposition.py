import unittest
from typing import List, Sequence, Tuple

from pymcmf.errors import DecompositionInconsistencyError
from pymcmf.graph import FlowGraph, GraphBuilder
from pymcmf.graph.flow import (
    DecomposedPath,
    calculate_flow_metrics,
    decompose_flow,
    edge_flows_from_paths,
)


def build_graph(edges: Sequence[Tuple[str, str, int]]) -> FlowGraph:
    """Build a frozen graph from (from, to, capacity) triples, all at zero cost."""
    builder = GraphBuilder()
    for u, v, capacity in edges:
        builder.add_edge(u, v, capacity, 0)
    graph, _ = builder.finalize()
    return graph


def labelled(graph: FlowGraph, paths: List[DecomposedPath]) -> List[Tuple[List[str], int]]:
    return [([graph.label(v) for v in path.vertices], path.flow) for path in paths]


class TestDecomposeFlow(unittest.TestCase):
    """
    Test suite for the path decomposition engine.

    Each test hands decompose_flow a graph and a per-edge flow directly, so
    the expected paths follow from the adjacency order alone.
    """

    def test_two_disjoint_routes(self):
        """Flow over two routes comes back as two paths, in adjacency order."""
        graph = build_graph([
            ('a', 'b', 10), ('b', 'c', 20), ('c', 'e', 15), ('a', 'd', 2), ('d', 'e', 3),
        ])
        flow = (10, 10, 10, 2, 2)
        source, sink = graph.vertex_id('a'), graph.vertex_id('e')

        paths = decompose_flow(graph, flow, source, sink)

        self.assertEqual(
            labelled(graph, paths),
            [(['a', 'b', 'c', 'e'], 10), (['a', 'd', 'e'], 2)]
        )
        self.assertEqual(paths[0].edges, (0, 1, 2))
        self.assertEqual(paths[1].edges, (3, 4))

    def test_paths_reconstruct_edge_flows(self):
        """
        Test exact reconstruction on a graph where routes split and merge.

        Verifies:
        - Path flows sum to the flow leaving the source
        - Every edge carries exactly its assigned flow across all paths
        - Every path runs from source to sink over existing edges
        """
        graph = build_graph([
            ('s', 'a', 8), ('s', 'b', 7), ('a', 'b', 3), ('a', 'c', 6),
            ('b', 'c', 4), ('b', 'd', 6), ('c', 't', 9), ('d', 't', 6),
        ])
        flow = (8, 7, 3, 5, 4, 6, 9, 6)
        source, sink = graph.vertex_id('s'), graph.vertex_id('t')

        paths = decompose_flow(graph, flow, source, sink)

        self.assertEqual(sum(path.flow for path in paths), 15)
        self.assertEqual(edge_flows_from_paths(graph, paths), list(flow))
        for path in paths:
            self.assertEqual(path.vertices[0], source)
            self.assertEqual(path.vertices[-1], sink)
            self.assertGreater(path.flow, 0)
            self.assertEqual(len(path.edges), len(path.vertices) - 1)
            for i, edge_id in enumerate(path.edges):
                edge = graph.get_edge(edge_id)
                self.assertEqual((edge.tail, edge.head), (path.vertices[i], path.vertices[i + 1]))

    def test_shared_prefix_is_not_overclaimed(self):
        """
        Two sink edges behind one prefix: once the prefix is drained, the
        remaining sink edge must be reached through the other route.
        """
        graph = build_graph([
            ('s', 'u', 5), ('s', 'w', 5), ('w', 'u', 5), ('u', 't', 5), ('u', 't', 5),
        ])
        flow = (5, 5, 5, 5, 5)

        paths = decompose_flow(graph, flow, graph.vertex_id('s'), graph.vertex_id('t'))

        self.assertEqual(
            labelled(graph, paths),
            [(['s', 'u', 't'], 5), (['s', 'w', 'u', 't'], 5)]
        )
        self.assertEqual([path.edges for path in paths], [(0, 3), (1, 2, 4)])

    def test_parallel_edges_are_distinct(self):
        """Parallel edges are decomposed as separate edge instances."""
        graph = build_graph([('a', 'b', 3), ('a', 'b', 4), ('b', 'c', 7)])
        flow = (3, 4, 7)

        paths = decompose_flow(graph, flow, graph.vertex_id('a'), graph.vertex_id('c'))

        self.assertEqual([(path.edges, path.flow) for path in paths], [((0, 2), 3), ((1, 2), 4)])

    def test_zero_flow(self):
        graph = build_graph([('a', 'b', 3), ('b', 'c', 4)])
        self.assertEqual(decompose_flow(graph, (0, 0), 0, 2), [])

    def test_source_equals_sink(self):
        graph = build_graph([('a', 'b', 3), ('b', 'a', 4)])
        self.assertEqual(decompose_flow(graph, (3, 3), 0, 0), [])

    def test_input_flow_not_modified(self):
        graph = build_graph([('a', 'b', 3), ('b', 'c', 4)])
        flow = [3, 3]
        decompose_flow(graph, flow, 0, 2)
        self.assertEqual(flow, [3, 3])

    def test_long_chain(self):
        """A path far longer than the interpreter recursion limit."""
        n = 5000
        graph = build_graph([(f"v{i}", f"v{i + 1}", 1) for i in range(n)])

        paths = decompose_flow(graph, [1] * n, graph.vertex_id('v0'), graph.vertex_id(f"v{n}"))

        self.assertEqual(len(paths), 1)
        self.assertEqual(len(paths[0].edges), n)
        self.assertEqual(paths[0].flow, 1)

    def test_non_conservative_flow_raises(self):
        """Flow entering a vertex without leaving it is reported, not dropped."""
        graph = build_graph([('a', 'b', 5), ('b', 'c', 5)])

        with self.assertRaises(DecompositionInconsistencyError):
            decompose_flow(graph, (5, 3), 0, 2)

    def test_flow_cycle_raises(self):
        """
        Known limitation: flow circulating on a cycle cannot be peeled into
        source-to-sink paths and is reported as an inconsistency.
        """
        graph = build_graph([('s', 'a', 1), ('a', 'b', 1), ('b', 'a', 1), ('a', 't', 1)])

        with self.assertRaises(DecompositionInconsistencyError) as ctx:
            decompose_flow(graph, (1, 1, 1, 1), graph.vertex_id('s'), graph.vertex_id('t'))
        self.assertIn('a->b', str(ctx.exception))

    def test_flow_length_mismatch_raises(self):
        graph = build_graph([('a', 'b', 5), ('b', 'c', 5)])

        with self.assertRaises(DecompositionInconsistencyError):
            decompose_flow(graph, (5,), 0, 2)


class TestFlowMetrics(unittest.TestCase):

    def test_metrics(self):
        paths = [
            DecomposedPath((0, 1, 2), (0, 1), 10),
            DecomposedPath((0, 3, 2), (2, 3), 2),
        ]
        metrics = calculate_flow_metrics(paths)

        self.assertEqual(metrics['total_flow'], 12)
        self.assertEqual(metrics['num_paths'], 2)
        self.assertEqual(metrics['max_path_flow'], 10)
        self.assertEqual(metrics['min_path_flow'], 2)
        self.assertEqual(metrics['unique_edges'], 4)
        self.assertEqual(metrics['average_path_length'], 2)

    def test_metrics_empty(self):
        self.assertEqual(calculate_flow_metrics([])['total_flow'], 0)


if __name__ == '__main__':
    unittest.main()
