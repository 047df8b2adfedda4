from dfsgraph.graph import AdjacencyGraph, VertexOutOfRange

import pydot

# pydot reports default attribute statements as nodes with these names
DEFAULT_STATEMENTS = ("node", "edge", "graph")

def graph_from_dot(dot_string, n=None):
    """
    Construct an AdjacencyGraph from a Graphviz description such as

        digraph { 0 -> 1; 1 -> 2; 0 -> 2; 3; }

    Node names must be non-negative integers, which are used directly as
    vertex indices. Edges are added in the order they appear, including
    edges inside subgraphs and clusters.

    Args:
        dot_string: string holding exactly one directed graph in DOT syntax
        n: number of vertices. If None, one more than the largest vertex
           index that appears in the description.

    Returns:
        an AdjacencyGraph

    Raises:
        VertexOutOfRange if n is given and a declared node is outside
        [0, n), InvalidEdgeEndpoint if an edge endpoint is.
    """
    pydot_graphs = pydot.graph_from_dot_data(dot_string)
    if not pydot_graphs:
        raise ValueError("could not parse DOT description")
    assert len(pydot_graphs) == 1, "DOT string resulted in > 1 graph"
    pydot_graph = pydot_graphs[0]

    if pydot_graph.get_type() != "digraph":
        raise ValueError("only directed graphs (digraph) are supported")

    edges = []
    declared = []  # nodes that are declared, with or without edges
    collect(pydot_graph, edges, declared)

    if n is None:
        n = max(declared + [v for edge in edges for v in edge], default=-1) + 1
    else:
        for v in declared:
            if not 0 <= v < n:
                raise VertexOutOfRange(v, n)

    return AdjacencyGraph(n, edges)

def collect(pydot_graph, edges, declared):
    """
    Append the edges and declared nodes of a pydot graph to the given lists,
    descending into subgraphs where they appear.
    """
    for node in pydot_graph.get_nodes():
        if node.get_name() not in DEFAULT_STATEMENTS:
            declared.append(vertex_index(node.get_name()))

    # pydot keeps edges and subgraphs in separate lists, but numbers the
    # statements of each (sub)graph in file order
    statements = pydot_graph.get_edges() + pydot_graph.get_subgraphs()
    statements.sort(key=lambda s: s.get_sequence() or 0)

    for statement in statements:
        if isinstance(statement, pydot.Edge):
            source = vertex_index(statement.get_source())
            destination = vertex_index(statement.get_destination())
            edges.append((source, destination))
        else:
            collect(statement, edges, declared)

def read_dot(path, n=None):
    """
    Construct an AdjacencyGraph from a DOT file. See graph_from_dot.
    """
    with open(path) as f:
        return graph_from_dot(f.read(), n)

def vertex_index(name):
    """
    Convert a pydot node name like '3' or '"3"' to an integer vertex index.
    """
    name = str(name).strip('"')
    if not name.isdigit():
        raise ValueError(f"node name {name!r} is not a vertex index")
    return int(name)
