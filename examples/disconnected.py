from dfsgraph.graph import build_graph, InvalidEdgeEndpoint
from dfsgraph.dfs import run_dfs
from dfsgraph.display import format_adjacency, format_traversal

##
#
# A graph with three components: a two-cycle {A,B}, an isolated vertex C, and
# an edge D->E. Each component gets its own block of timestamps.
#
##

g = build_graph(5, [(0,1), (1,0), (3,4)])
print(g)
print(format_adjacency(g), end="")

res = run_dfs(g, verbose=True)
print("")
print(format_traversal(res), end="")
print(res)

# Edges that point outside the graph are rejected up front
try:
    build_graph(5, [(0,1), (4,5)])
except InvalidEdgeEndpoint as e:
    print(f"Could not build graph: vertex {e.index} does not exist")
