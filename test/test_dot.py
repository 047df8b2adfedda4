import os
import tempfile
import unittest
from dfsgraph.dot import graph_from_dot, read_dot, vertex_index
from dfsgraph.graph import InvalidEdgeEndpoint, VertexOutOfRange
from dfsgraph.dfs import run_dfs

SAMPLE_DOT = """
digraph sample {
    0 -> 1;
    1 -> 2;
    2 -> 3;
    2 -> 5;
    0 -> 2;
    5 -> 3;
    3 -> 5;
    3 -> 4;
    5 -> 1;
    1 -> 4;
}
"""

class TestDot(unittest.TestCase):
    def test_sample(self):
        g = graph_from_dot(SAMPLE_DOT)

        self.assertEqual(g.nv(), 6)
        self.assertEqual(g.ne(), 10)
        self.assertEqual(g.neighbors(0), (2,1))
        self.assertEqual(g.neighbors(2), (5,3))
        self.assertEqual(run_dfs(g)[0], (1, 12))

    def test_declared_nodes(self):
        # Node 3 has no edges but is still a vertex
        g = graph_from_dot('digraph { 0 -> 1; "3"; }')
        self.assertEqual(g.nv(), 4)
        self.assertEqual(g.neighbors(3), ())

    def test_explicit_vertex_count(self):
        g = graph_from_dot("digraph { 0 -> 1; }", n=5)
        self.assertEqual(g.nv(), 5)

        with self.assertRaises(InvalidEdgeEndpoint):
            graph_from_dot("digraph { 0 -> 4; }", n=3)

    def test_subgraphs(self):
        g = graph_from_dot("digraph { subgraph cluster_a { 0 -> 1; 1 -> 2; } }")
        self.assertEqual(g.nv(), 3)
        self.assertEqual(g.ne(), 2)

        # Edges inside subgraphs keep their place in the file
        g = graph_from_dot("""
            digraph {
                0 -> 3;
                subgraph cluster_a {
                    0 -> 1;
                    subgraph inner { 1 -> 2; 4; }
                }
                0 -> 2;
            }
            """)
        self.assertEqual(g.nv(), 5)
        self.assertEqual(g.edges, ((0,3), (0,1), (1,2), (0,2)))
        self.assertEqual(g.neighbors(0), (2,1,3))
        self.assertEqual(g.neighbors(4), ())

    def test_parallel_edges_keep_file_order(self):
        g = graph_from_dot("digraph { 0 -> 1; 0 -> 2; 0 -> 1; 0 -> 3; }")
        self.assertEqual(g.edges, ((0,1), (0,2), (0,1), (0,3)))
        self.assertEqual(g.neighbors(0), (3,1,2,1))

    def test_declared_node_out_of_range(self):
        with self.assertRaises(VertexOutOfRange) as cm:
            graph_from_dot("digraph { 0 -> 1; 7; }", n=3)
        self.assertEqual(cm.exception.index, 7)

    def test_bad_input(self):
        with self.assertRaises(ValueError):
            graph_from_dot("graph { 0 -- 1; }")
        with self.assertRaises(ValueError):
            graph_from_dot("digraph { a -> b; }")

    def test_vertex_index(self):
        self.assertEqual(vertex_index("7"), 7)
        self.assertEqual(vertex_index('"12"'), 12)
        with self.assertRaises(ValueError):
            vertex_index("-1")

    def test_read_dot(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "sample.dot")
            with open(path, "w") as f:
                f.write(SAMPLE_DOT)
            g = read_dot(path)
        self.assertEqual(g.nv(), 6)

if __name__ == '__main__':
    unittest.main()
