"""Adjacency-list graph over dense integer vertices.

`Graph` is the single data structure every algorithm family reads. Vertices are
the integers ``0..n-1``; the vertex count is fixed at construction and edges can
only be added, never removed. Each vertex keeps an insertion-ordered list of
``(neighbor, weight)`` pairs, which fixes the visiting order of BFS/DFS.

Undirected edges are stored once in the edge table and twice in the adjacency
lists (once per endpoint).
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Hashable, Iterator, List, Optional, Tuple, Union

Weight = Union[int, float]
Arc = Tuple[int, Weight]


@dataclass(frozen=True)
class Edge:
    """A weighted edge.

    Attributes:
        src: Source vertex (the smaller endpoint for canonical undirected edges).
        dst: Target vertex.
        weight: Edge weight.
        key: Optional caller-supplied identifier.
    """

    src: int
    dst: int
    weight: Weight = 1
    key: Optional[Hashable] = None


class Graph:
    """A static weighted graph with a fixed number of vertices.

    This class enforces:
      - Vertex identifiers are integers in ``[0, n)``.
      - Adding an edge with an out-of-range endpoint raises ValueError and
        leaves the graph unchanged.
      - No edge or vertex removal.

    Attributes:
        n: Number of vertices.
        directed: Whether edges are one-way.
    """

    def __init__(self, n: int, directed: bool = False) -> None:
        """Initialize a graph with ``n`` isolated vertices.

        Args:
            n: Number of vertices. Must be non-negative.
            directed: If False, every edge is traversable in both directions.

        Raises:
            ValueError: If ``n`` is negative.
        """
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}.")
        self.n: int = n
        self.directed: bool = directed
        self._adj: List[List[Arc]] = [[] for _ in range(n)]
        # Parallel to _adj: index into _edges for every adjacency entry
        self._adj_edge_idx: List[List[int]] = [[] for _ in range(n)]
        self._edges: List[Edge] = []

    def __len__(self) -> int:
        return self.n

    def __contains__(self, vertex: object) -> bool:
        # Any integer type (numpy ints included) counts; bool does not
        if isinstance(vertex, bool):
            return False
        try:
            index = operator.index(vertex)
        except TypeError:
            return False
        return 0 <= index < self.n

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.n))

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph(n={self.n}, {kind}, edges={len(self._edges)})"

    def has_vertex(self, vertex: int) -> bool:
        """Return True if ``vertex`` is a valid index."""
        return vertex in self

    #
    # Edge management
    #
    def add_edge(
        self,
        u: int,
        v: int,
        weight: Weight = 1,
        key: Optional[Hashable] = None,
    ) -> int:
        """Add an edge from ``u`` to ``v``.

        For undirected graphs the edge is also reachable from ``v`` to ``u``.

        Args:
            u: Source vertex.
            v: Target vertex.
            weight: Edge weight.
            key: Optional external identifier stored on the edge.

        Returns:
            int: Insertion index of the new edge in :attr:`edges`.

        Raises:
            ValueError: If either endpoint is outside ``[0, n)``.
        """
        if u not in self:
            raise ValueError(f"Source vertex {u!r} is out of range [0, {self.n}).")
        if v not in self:
            raise ValueError(f"Target vertex {v!r} is out of range [0, {self.n}).")
        u, v = operator.index(u), operator.index(v)

        edge_idx = len(self._edges)
        self._edges.append(Edge(u, v, weight, key))
        self._adj[u].append((v, weight))
        self._adj_edge_idx[u].append(edge_idx)
        if not self.directed:
            self._adj[v].append((u, weight))
            self._adj_edge_idx[v].append(edge_idx)
        return edge_idx

    #
    # Accessors
    #
    @property
    def adj(self) -> List[List[Arc]]:
        """Per-vertex lists of ``(neighbor, weight)`` in insertion order.

        The lists are the live internal structure; callers must not mutate them.
        """
        return self._adj

    @property
    def edges(self) -> List[Edge]:
        """All edges in insertion order, each undirected edge once."""
        return self._edges

    @property
    def num_edges(self) -> int:
        return len(self._edges)

    def neighbors(self, u: int) -> List[Arc]:
        """Return the ``(neighbor, weight)`` list of ``u``.

        Raises:
            KeyError: If ``u`` is out of range.
        """
        if u not in self:
            raise KeyError(f"Vertex {u!r} is not in the graph.")
        return self._adj[u]

    def incident(self, u: int) -> Iterator[Tuple[int, Weight, int]]:
        """Yield ``(neighbor, weight, edge_index)`` for every arc leaving ``u``.

        Raises:
            KeyError: If ``u`` is out of range.
        """
        if u not in self:
            raise KeyError(f"Vertex {u!r} is not in the graph.")
        return (
            (v, w, idx)
            for (v, w), idx in zip(self._adj[u], self._adj_edge_idx[u])
        )

    def edge_list(self) -> List[Edge]:
        """Return every edge once as a list of :class:`Edge`.

        Directed graphs return all arcs in insertion order. Undirected graphs
        return each edge with ``src <= dst``, ordered by ``src`` then by
        adjacency order; parallel edges are all kept.
        """
        if self.directed:
            return list(self._edges)

        out: List[Edge] = []
        seen_loops = set()
        for u in range(self.n):
            for (v, w), idx in zip(self._adj[u], self._adj_edge_idx[u]):
                if u < v:
                    out.append(Edge(u, v, w, self._edges[idx].key))
                elif u == v and idx not in seen_loops:
                    # A self-loop appears twice in adj[u]
                    seen_loops.add(idx)
                    out.append(Edge(u, v, w, self._edges[idx].key))
        return out

    def reverse(self) -> Graph:
        """Return the transpose of a directed graph (an equal copy if undirected)."""
        rev = Graph(self.n, directed=self.directed)
        for edge in self._edges:
            if self.directed:
                rev.add_edge(edge.dst, edge.src, edge.weight, edge.key)
            else:
                rev.add_edge(edge.src, edge.dst, edge.weight, edge.key)
        return rev

    def has_negative_weights(self) -> bool:
        """Return True if any edge weight is below zero."""
        return any(edge.weight < 0 for edge in self._edges)

    def in_degrees(self) -> List[int]:
        """Return the number of adjacency entries pointing at each vertex."""
        indeg = [0] * self.n
        for arcs in self._adj:
            for v, _ in arcs:
                indeg[v] += 1
        return indeg
