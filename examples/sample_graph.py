from dfsgraph.graph import build_graph
from dfsgraph.dfs import run_dfs
from dfsgraph.display import format_adjacency, format_traversal, vertex_label

import matplotlib.pyplot as plt

##
#
# Build the six vertex graph A..F, print its adjacency list, and print the
# depth-first discovery (push) and finish (pop) time of each vertex.
#
##

num_vertices = 6
edges = [(0,1),
         (1,2),
         (2,3),
         (2,5),
         (0,2),
         (5,3),
         (3,5),
         (3,4),
         (5,1),
         (1,4)]

g = build_graph(num_vertices, edges)
print(format_adjacency(g), end="")

res = run_dfs(g, verbose=False)
print(format_traversal(res), end="")

print("Push order: ", " ".join(vertex_label(v) for v in res.push_order()))
print("Pop order:  ", " ".join(vertex_label(v) for v in res.pop_order()))

res.visualize(label=vertex_label)
plt.show()
