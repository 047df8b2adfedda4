from dfsgraph.dot import graph_from_dot
from dfsgraph.dfs import run_dfs
from dfsgraph.display import format_traversal, vertex_label

##
#
# Load a graph from a Graphviz description, run a depth-first search, and
# render the graph with graphviz.
#
##

dot_string = """
digraph {
    0 -> 1; 0 -> 2;
    1 -> 3;
    2 -> 3; 2 -> 2;
    4 -> 0;
    5;
}
"""

g = graph_from_dot(dot_string)
print(g)

res = run_dfs(g)
print(format_traversal(res), end="")
print("DFS trees rooted at: ", ", ".join(vertex_label(v) for v in res.roots))

g.visualize(label=vertex_label)
