"""Shortest-path algorithms.

Implements single-source Dijkstra, 0-1 BFS, Bellman-Ford and DAG relaxation,
plus all-pairs Floyd-Warshall.

Notes:
    Distances of unreachable vertices are ``INF`` (``float("inf")``), which
    compares greater than every finite int or float weight. Integer weights
    produce integer distances.

    Dijkstra and 0-1 BFS validate their weight preconditions up front (see
    ``AlgorithmConfig.validate_weights``) rather than silently returning wrong
    distances. Bellman-Ford accepts any weights and reports negative cycles
    reachable from the source.

    For undirected graphs every edge is relaxed in both directions. A negative
    undirected edge is therefore itself a negative cycle.
"""

from collections import deque
from heapq import heappop, heappush
from typing import List, Optional, Tuple

import numpy as np

from graphkit.algorithms.base import INF, NO_VERTEX, Weight, check_source
from graphkit.algorithms.traversal import topological_sort_dfs
from graphkit.algorithms.types import (
    AllPairsShortestPaths,
    BellmanFordResult,
    ShortestPaths,
)
from graphkit.config import ALGORITHM_CONFIG
from graphkit.graph.adjacency import Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)


def dijkstra(graph: Graph, src: int) -> ShortestPaths:
    """Single-source shortest paths for non-negative weights.

    Uses a binary heap with lazy deletion: a popped entry whose distance is
    larger than the vertex's current best is stale and skipped.

    Args:
        graph: Graph with non-negative edge weights.
        src: Source vertex.

    Returns:
        ShortestPaths with distances and shortest-path-tree parents.

    Raises:
        KeyError: If ``src`` is not in the graph.
        ValueError: If the graph has a negative edge weight.
    """
    check_source(graph, src)
    if ALGORITHM_CONFIG.validate_weights and graph.has_negative_weights():
        raise ValueError(
            "Dijkstra requires non-negative edge weights; use bellman_ford instead."
        )

    adj = graph.adj
    dist: List[Weight] = [INF] * graph.n
    parent = [NO_VERTEX] * graph.n
    dist[src] = 0
    min_pq: List[Tuple[Weight, int]] = [(0, src)]

    while min_pq:
        current_dist, u = heappop(min_pq)
        if current_dist > dist[u]:
            continue
        for v, w in adj[u]:
            new_dist = current_dist + w
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                heappush(min_pq, (new_dist, v))

    return ShortestPaths(dist=dist, parent=parent)


def zero_one_bfs(graph: Graph, src: int) -> ShortestPaths:
    """Single-source shortest paths for weights in {0, 1}.

    Zero-weight relaxations go to the front of a deque and unit-weight ones to
    the back, which keeps the deque ordered by distance without a heap.

    Raises:
        KeyError: If ``src`` is not in the graph.
        ValueError: If some edge weight is neither 0 nor 1.
    """
    check_source(graph, src)
    if ALGORITHM_CONFIG.validate_weights:
        for edge in graph.edges:
            if edge.weight not in (0, 1):
                raise ValueError(
                    f"0-1 BFS requires weights in {{0, 1}}; edge "
                    f"{edge.src}->{edge.dst} has weight {edge.weight!r}."
                )

    adj = graph.adj
    dist: List[Weight] = [INF] * graph.n
    parent = [NO_VERTEX] * graph.n
    dist[src] = 0
    dq = deque([src])

    while dq:
        u = dq.popleft()
        for v, w in adj[u]:
            new_dist = dist[u] + w
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent[v] = u
                if w == 0:
                    dq.appendleft(v)
                else:
                    dq.append(v)

    return ShortestPaths(dist=dist, parent=parent)


def bellman_ford(graph: Graph, src: int) -> BellmanFordResult:
    """Single-source shortest paths allowing negative weights.

    Relaxes every arc up to ``n - 1`` times, stopping early after a pass with
    no change. One more pass then checks whether any arc is still relaxable,
    which means a negative cycle is reachable from ``src``.

    Args:
        graph: Graph with arbitrary weights.
        src: Source vertex.

    Returns:
        BellmanFordResult; ``has_negative_cycle`` is True iff a negative cycle
        is reachable from ``src``.

    Raises:
        KeyError: If ``src`` is not in the graph.
    """
    check_source(graph, src)
    arcs = [(u, v, w) for u in range(graph.n) for v, w in graph.adj[u]]
    dist: List[Weight] = [INF] * graph.n
    parent = [NO_VERTEX] * graph.n
    dist[src] = 0

    passes = 0
    for _ in range(graph.n - 1):
        passes += 1
        updated = False
        for u, v, w in arcs:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
                updated = True
        if not updated:
            break

    has_negative_cycle = any(
        dist[u] != INF and dist[u] + w < dist[v] for u, v, w in arcs
    )
    logger.debug(
        "Bellman-Ford from %d: %d relaxation passes, negative cycle=%s",
        src,
        passes,
        has_negative_cycle,
    )
    return BellmanFordResult(
        dist=dist, parent=parent, has_negative_cycle=has_negative_cycle
    )


def dag_shortest_path(graph: Graph, src: int) -> Optional[ShortestPaths]:
    """Single-source shortest paths on a directed acyclic graph.

    Relaxes the outgoing arcs of each vertex once, in topological order.
    Negative weights are fine.

    Returns:
        ShortestPaths, or None if the graph has no topological order.

    Raises:
        KeyError: If ``src`` is not in the graph.
    """
    check_source(graph, src)
    order = topological_sort_dfs(graph)
    if not order:
        logger.debug("DAG shortest path from %d: graph is not acyclic", src)
        return None

    adj = graph.adj
    dist: List[Weight] = [INF] * graph.n
    parent = [NO_VERTEX] * graph.n
    dist[src] = 0
    for u in order:
        if dist[u] == INF:
            continue
        for v, w in adj[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                parent[v] = u
    return ShortestPaths(dist=dist, parent=parent)


def floyd_warshall(graph: Graph) -> AllPairsShortestPaths:
    """All-pairs shortest paths in O(n^3).

    The distance matrix starts with zeros on the diagonal and the cheapest
    direct edge for every pair. For each intermediate vertex ``k``, every pair
    ``(i, j)`` is relaxed through ``k`` in one vectorized step, and the
    next-hop matrix takes ``next_hop[i][k]`` wherever the route improved.

    Args:
        graph: Graph with arbitrary weights.

    Returns:
        AllPairsShortestPaths with float distances, next hops and a negative
        cycle flag.
    """
    n = graph.n
    if ALGORITHM_CONFIG.is_large_for_all_pairs(n):
        logger.warning(
            "Floyd-Warshall on %d vertices needs %d relaxations; "
            "consider single-source algorithms",
            n,
            n**3,
        )

    dist = np.full((n, n), np.inf, dtype=np.float64)
    next_hop = np.full((n, n), NO_VERTEX, dtype=np.int64)
    np.fill_diagonal(dist, 0.0)
    np.fill_diagonal(next_hop, np.arange(n))

    for u in range(n):
        for v, w in graph.adj[u]:
            if w < dist[u, v]:
                dist[u, v] = w
                next_hop[u, v] = v

    for k in range(n):
        via_k = dist[:, k : k + 1] + dist[k : k + 1, :]
        better = via_k < dist
        if better.any():
            dist = np.where(better, via_k, dist)
            next_hop = np.where(better, next_hop[:, k : k + 1], next_hop)

    has_negative_cycle = bool(n and (np.diag(dist) < 0).any())
    return AllPairsShortestPaths(
        dist=dist, next_hop=next_hop, has_negative_cycle=has_negative_cycle
    )
