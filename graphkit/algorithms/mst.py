"""Minimum spanning trees: Kruskal and Prim.

Both algorithms require an undirected graph and raise ValueError otherwise.
A disconnected graph is not an error: the result carries ``connected=False``
together with the forest (Kruskal) or the start vertex's tree (Prim).

Ties between equal-weight edges may resolve to different edge sets in the two
algorithms; the total weight of a connected graph's MST is the same.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import List, Tuple

from graphkit.algorithms.base import INF, NO_VERTEX, Weight, check_source
from graphkit.algorithms.types import SpanningTree
from graphkit.graph.adjacency import Edge, Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)


class DisjointSet:
    """Union-find over ``0..n-1`` with path compression and union by rank."""

    def __init__(self, n: int) -> None:
        self._parent: List[int] = list(range(n))
        self._rank: List[int] = [0] * n
        self.num_sets: int = n

    def find(self, x: int) -> int:
        """Return the representative of ``x``'s set."""
        parent = self._parent
        while parent[x] != x:
            # Path halving
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    def union(self, a: int, b: int) -> bool:
        """Merge the sets of ``a`` and ``b``.

        Returns:
            True if a merge happened, False if they were already together.
        """
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        if self._rank[ra] < self._rank[rb]:
            ra, rb = rb, ra
        self._parent[rb] = ra
        if self._rank[ra] == self._rank[rb]:
            self._rank[ra] += 1
        self.num_sets -= 1
        return True

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)


def _require_undirected(graph: Graph, name: str) -> None:
    if graph.directed:
        raise ValueError(f"{name} requires an undirected graph.")


def kruskal(graph: Graph) -> SpanningTree:
    """Minimum spanning forest by ascending-weight edge selection.

    Edges from :meth:`Graph.edge_list` are sorted by weight (stable, so
    insertion order breaks ties) and accepted whenever their endpoints lie in
    different components. Processing stops once ``n - 1`` edges are accepted.

    Raises:
        ValueError: If the graph is directed.
    """
    _require_undirected(graph, "Kruskal's algorithm")

    dsu = DisjointSet(graph.n)
    accepted: List[Edge] = []
    total: Weight = 0
    for edge in sorted(graph.edge_list(), key=lambda e: e.weight):
        if dsu.union(edge.src, edge.dst):
            accepted.append(edge)
            total += edge.weight
            if len(accepted) == graph.n - 1:
                break

    connected = graph.n == 0 or len(accepted) == graph.n - 1
    if not connected:
        logger.warning(
            "Kruskal: graph is disconnected (%d components)", dsu.num_sets
        )
    return SpanningTree(total_weight=total, edges=accepted, connected=connected)


def prim(graph: Graph, start: int = 0) -> SpanningTree:
    """Minimum spanning tree grown from ``start`` with a binary heap.

    Each vertex outside the tree keeps the cheapest known edge weight into the
    tree (its key); the heap holds candidate keys with lazy deletion.

    Args:
        graph: Undirected graph.
        start: Root vertex of the tree.

    Returns:
        SpanningTree whose edges are ``(parent, child, weight)``.

    Raises:
        ValueError: If the graph is directed.
        KeyError: If ``start`` is not in a non-empty graph.
    """
    _require_undirected(graph, "Prim's algorithm")
    if graph.n == 0:
        return SpanningTree(total_weight=0, edges=[], connected=True)
    check_source(graph, start)

    adj = graph.adj
    key: List[Weight] = [INF] * graph.n
    parent = [NO_VERTEX] * graph.n
    in_tree = [False] * graph.n
    key[start] = 0
    min_pq: List[Tuple[Weight, int]] = [(0, start)]

    total: Weight = 0
    tree_edges: List[Edge] = []
    while min_pq:
        k, u = heappop(min_pq)
        if in_tree[u]:
            continue
        in_tree[u] = True
        if parent[u] != NO_VERTEX:
            total += k
            tree_edges.append(Edge(parent[u], u, k))
        for v, w in adj[u]:
            if not in_tree[v] and w < key[v]:
                key[v] = w
                parent[v] = u
                heappush(min_pq, (w, v))

    connected = len(tree_edges) == graph.n - 1
    if not connected:
        logger.warning(
            "Prim: only %d of %d vertices reachable from %d",
            len(tree_edges) + 1,
            graph.n,
            start,
        )
    return SpanningTree(total_weight=total, edges=tree_edges, connected=connected)
