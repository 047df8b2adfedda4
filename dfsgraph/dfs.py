from dfsgraph.graph import AdjacencyGraph, VertexOutOfRange

import numpy as np
import matplotlib.pyplot as plt

class TraversalResult:
    """
    Discovery and finish times for every vertex of a graph, as computed by a
    depth-first search.

    Both times come from one counter that starts at 1 and ticks once for each
    discovery and once for each finish, so for a graph with n vertices the
    2n times are exactly 1, 2, ..., 2n. The interval [discovery, finish] of
    one vertex is either disjoint from or nested in that of any other vertex.
    """
    def __init__(self, discovery, finish, parent, roots):
        """
        Args:
            discovery: integer array of discovery times, indexed by vertex
            finish: integer array of finish times, indexed by vertex
            parent: integer array giving each vertex's parent in the DFS
                    forest, or -1 for the root of a tree
            roots: list of the vertices that started a new DFS tree, in the
                   order they were reached
        """
        assert len(discovery) == len(finish) == len(parent)

        self.discovery = discovery
        self.finish = finish
        self.parent = parent
        self.roots = tuple(roots)

        for array in (self.discovery, self.finish, self.parent):
            array.setflags(write=False)

    def __len__(self):
        return len(self.discovery)

    def __getitem__(self, v):
        """
        Return the (discovery, finish) pair of vertex v.
        """
        self._check_vertex(v)
        return int(self.discovery[v]), int(self.finish[v])

    def _check_vertex(self, v):
        if not 0 <= v < len(self):
            raise VertexOutOfRange(v, len(self))

    def __iter__(self):
        for v in range(len(self)):
            yield (v,) + self[v]

    def triples(self):
        """
        Return a list of (vertex, discovery, finish) triples in ascending
        vertex order.
        """
        return list(self)

    def push_order(self):
        """
        Return the vertices in the order they were discovered.
        """
        return [int(v) for v in np.argsort(self.discovery, kind='stable')]

    def pop_order(self):
        """
        Return the vertices in the order they were finished.
        """
        return [int(v) for v in np.argsort(self.finish, kind='stable')]

    def push_numbers(self):
        """
        Number the vertices 1..n in the order they were pushed onto the DFS
        stack (i.e. discovered).

        Returns:
            an integer array mapping each vertex to its push number
        """
        return self._ranks(self.push_order())

    def pop_numbers(self):
        """
        Number the vertices 1..n in the order they were popped off the DFS
        stack (i.e. finished).

        Returns:
            an integer array mapping each vertex to its pop number
        """
        return self._ranks(self.pop_order())

    def _ranks(self, order):
        ranks = np.zeros(len(self), dtype=int)
        ranks[np.array(order, dtype=int)] = np.arange(1, len(self) + 1)
        return ranks

    def is_ancestor(self, u, v):
        """
        Check whether u is an ancestor of v in the DFS forest, which is the
        case exactly when v's interval is nested inside u's. Every vertex is
        its own ancestor.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        return bool(self.discovery[u] <= self.discovery[v] and
                    self.finish[v] <= self.finish[u])

    def visualize(self, label=str):
        """
        Draw each vertex's [discovery, finish] interval as a horizontal bar on
        the current pyplot axes, with vertex 0 at the top.

        Args:
            label: function mapping a vertex index to its tick label
        """
        n = len(self)
        ax = plt.gca()
        for v in range(n):
            d, f = self[v]
            color = 'C1' if self.parent[v] < 0 else 'C0'
            ax.barh(v, f - d, left=d, height=0.6, color=color,
                    edgecolor='k', alpha=0.7)

        ax.set_yticks(range(n))
        ax.set_yticklabels([label(v) for v in range(n)])
        ax.invert_yaxis()
        ax.set_xlabel("time")
        if n > 0:
            ax.set_xlim(0, 2*n + 1)

    def __str__(self):
        return f"depth-first search of {len(self)} vertices in {len(self.roots)} trees."

class DepthFirstSearch:
    """
    A single depth-first search over an AdjacencyGraph.

    The search visits vertices 0, 1, ..., n-1 in turn, and starts a new DFS
    tree from each one that hasn't been reached yet. Within a tree, neighbors
    are explored in the order given by the graph's adjacency sequences. All
    of the search state (visited marks, the time counter, the DFS stack)
    belongs to this object, so the graph itself is only read.
    """
    def __init__(self, graph, verbose=False):
        """
        Args:
            graph: the AdjacencyGraph to search
            verbose: whether to print each push and pop as it happens
        """
        assert isinstance(graph, AdjacencyGraph)
        self.graph = graph
        self.verbose = verbose

        n = graph.nv()
        self.discovery = np.zeros(n, dtype=int)  # 0 means not visited yet
        self.finish = np.zeros(n, dtype=int)
        self.parent = np.full(n, -1, dtype=int)
        self.roots = []

        self.time = 1
        self.result = None

    def run(self):
        """
        Run the search (only the first call does any work).

        Returns:
            a TraversalResult with the discovery and finish time of every
            vertex
        """
        if self.result is None:
            for v in range(self.graph.nv()):
                if self.discovery[v] == 0:
                    self.roots.append(v)
                    self.visit(v)

            assert self.time == 2*self.graph.nv() + 1
            self.result = TraversalResult(self.discovery, self.finish,
                                          self.parent, self.roots)
        return self.result

    def visit(self, root):
        """
        Explore everything reachable from root that hasn't been visited yet.

        This follows the usual recursive definition (discover a vertex, visit
        each unvisited neighbor in turn, then finish the vertex), but keeps
        its own stack of (vertex, remaining neighbors) so that long paths
        don't run into Python's recursion limit.
        """
        self.push(root, -1)
        stack = [(root, iter(self.graph.neighbors(root)))]
        while stack:
            vertex, neighbors = stack[-1]
            for w in neighbors:
                if self.discovery[w] == 0:
                    self.push(w, vertex)
                    stack.append((w, iter(self.graph.neighbors(w))))
                    break
            else:
                stack.pop()
                self.pop(vertex)

    def push(self, v, parent):
        self.discovery[v] = self.time
        self.parent[v] = parent
        if self.verbose:
            print(f"push {v} at time {self.time}")
        self.time += 1

    def pop(self, v):
        self.finish[v] = self.time
        if self.verbose:
            print(f"pop  {v} at time {self.time}")
        self.time += 1

def run_dfs(graph, verbose=False):
    """
    Compute depth-first discovery and finish times for every vertex of the
    given graph. See DepthFirstSearch for details.
    """
    return DepthFirstSearch(graph, verbose).run()
