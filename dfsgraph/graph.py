import numbers

import graphviz

class InvalidEdgeEndpoint(ValueError):
    """
    Raised when an edge references a vertex outside [0, n).
    """
    def __init__(self, edge, position, index, n):
        self.edge = edge
        self.position = position
        self.index = index
        self.n = n
        super().__init__(
                f"edge {position} {edge} references vertex {index}, "
                f"which is not in [0, {n})")

class VertexOutOfRange(IndexError):
    """
    Raised when asking for the neighbors of a vertex outside [0, n).
    """
    def __init__(self, index, n):
        self.index = index
        self.n = n
        super().__init__(f"vertex {index} is not in [0, {n})")

class AdjacencyGraph:
    """
    A directed graph with a fixed number of vertices, stored as one adjacency
    sequence per vertex.

    Vertices are the integers 0, 1, ..., n-1. Each adjacency sequence lists
    the destinations of the edges leaving that vertex, most recently added
    edge first. Self-loops and parallel edges are allowed. The graph is built
    once and can't be modified afterwards.
    """
    def __init__(self, n, edges):
        """
        Create a directed graph from a vertex count and an edge list.

        Args:
            n: the number of vertices, a non-negative integer
            edges: a list of (source, destination) pairs of integers in
                   [0, n). Order matters: later edges from the same source
                   come first in that source's adjacency sequence.

        Raises:
            InvalidEdgeEndpoint if any endpoint is outside [0, n). In that
            case nothing is built.
        """
        if isinstance(n, bool) or not isinstance(n, numbers.Integral) or n < 0:
            raise ValueError(f"vertex count must be a non-negative integer, got {n!r}")
        n = int(n)

        # verify that each edge connects valid vertices before building
        # anything
        edges = [tuple(edge) for edge in edges]
        for position, edge in enumerate(edges):
            assert len(edge) == 2, "edges must be (source, destination) pairs"
            for endpoint in edge:
                if not 0 <= endpoint < n:
                    raise InvalidEdgeEndpoint(edge, position, endpoint, n)

        self._n = n
        self._edges = tuple(edges)

        # newest destination goes to the front
        self._adjacency = [[] for _ in range(n)]
        for source, destination in self._edges:
            self._adjacency[source].append(destination)
        for adjacency in self._adjacency:
            adjacency.reverse()

    @property
    def edges(self):
        """
        The edges of this graph, in the order they were given.
        """
        return self._edges

    def neighbors(self, v):
        """
        Return the adjacency sequence of a vertex.

        Args:
            v: integer index of the vertex

        Returns:
            a tuple of destination vertices, most recently added edge first
        """
        if not 0 <= v < self._n:
            raise VertexOutOfRange(v, self._n)
        return tuple(self._adjacency[v])

    def nv(self):
        """
        Return the number of vertices in this graph
        """
        return self._n

    def ne(self):
        """
        Return the number of edges in this graph
        """
        return len(self._edges)

    def __len__(self):
        return self._n

    def to_dot(self, label=str):
        """
        Return a Graphviz DOT description of this graph.

        Args:
            label: function mapping a vertex index to the text shown on its
                   node
        """
        dot = graphviz.Digraph()
        for v in range(self._n):
            dot.node(str(v), label(v))
        for source, destination in self._edges:
            dot.edge(str(source), str(destination))
        return dot.source

    def visualize(self, label=str, filename='/tmp/my_graph.gv', view=True):
        """
        Render this graph to a jpg with Graphviz. Requires the Graphviz `dot`
        executable.

        Args:
            label: function mapping a vertex index to the text shown on its
                   node
            filename: where to write the DOT source. The image is written
                      next to it, e.g. /tmp/my_graph.gv.jpg.
            view: whether to open the image in the system viewer

        Returns:
            the path of the rendered image
        """
        s = graphviz.Source(self.to_dot(label))
        return s.render(filename, format='jpg', view=view)

    def __str__(self):
        return f"directed graph with {self.nv()} vertices and {self.ne()} edges."

def build_graph(n, edges):
    """
    Build an AdjacencyGraph with n vertices from the given edge list. See
    AdjacencyGraph for details.
    """
    return AdjacencyGraph(n, edges)
