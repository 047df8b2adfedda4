def vertex_label(v):
    """
    Name vertex 0 "A", vertex 1 "B", and so on. Vertices past "Z" just use
    their index.
    """
    if 0 <= v < 26:
        return chr(ord('A') + v)
    return str(v)

def format_adjacency(graph, label=vertex_label):
    """
    Write out the adjacency list of a graph, one vertex per line:

        A  -->  C  B

    Args:
        graph: an AdjacencyGraph
        label: function mapping a vertex index to its printed name

    Returns:
        the adjacency list as a string
    """
    lines = ["The adjacency list:"]
    for v in range(graph.nv()):
        line = label(v) + "  -->  "
        for w in graph.neighbors(v):
            line += label(w) + "  "
        lines.append(line)
    return lines[0] + "\n" + "".join(line + "\n\n" for line in lines[1:])

def format_traversal(result, label=vertex_label):
    """
    Write out the discovery and finish time of each vertex, one vertex per
    line:

        1  A  12

    Args:
        result: a TraversalResult
        label: function mapping a vertex index to its printed name

    Returns:
        the table as a string
    """
    lines = ["The dfs results:"]
    for v, discovery, finish in result:
        lines.append(f"{discovery}  {label(v)}  {finish}")
    return lines[0] + "\n" + "".join(line + "\n\n" for line in lines[1:])
