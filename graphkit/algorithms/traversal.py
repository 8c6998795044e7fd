"""Graph traversals: BFS, DFS and topological sort.

All traversals follow adjacency insertion order, so results are deterministic
for a fixed sequence of ``add_edge`` calls.

Notes:
    The iterative DFS pushes neighbors in reverse adjacency order, so it pops
    them in the same order the recursive DFS visits them and both variants
    report the same discovery order.

    A graph has no topological order when it contains a cycle. Both sort
    variants signal this by returning an empty list. An undirected graph with
    at least one edge is cyclic under this definition, since each edge is
    traversable both ways.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, List

from graphkit.algorithms.base import (
    NO_VERTEX,
    UNREACHABLE,
    DfsMode,
    TopoMethod,
    check_source,
)
from graphkit.algorithms.types import BfsResult
from graphkit.graph.adjacency import Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)

_WHITE, _GRAY, _BLACK = 0, 1, 2


def bfs(graph: Graph, src: int) -> BfsResult:
    """Breadth-first search from a single source.

    Args:
        graph: Graph to traverse.
        src: Source vertex.

    Returns:
        BfsResult with hop distances and BFS-tree parents.

    Raises:
        KeyError: If ``src`` is not in the graph.
    """
    return multi_source_bfs(graph, [src])


def multi_source_bfs(graph: Graph, sources: Iterable[int]) -> BfsResult:
    """Breadth-first search seeded with several sources at distance 0.

    Each vertex gets the hop distance to its nearest source. Sources are
    enqueued in the given order; duplicates are ignored.

    Raises:
        KeyError: If any source is not in the graph.
    """
    dist = [UNREACHABLE] * graph.n
    parent = [NO_VERTEX] * graph.n
    queue: deque = deque()
    for s in sources:
        check_source(graph, s)
        if dist[s] == UNREACHABLE:
            dist[s] = 0
            queue.append(s)

    adj = graph.adj
    while queue:
        u = queue.popleft()
        next_dist = dist[u] + 1
        for v, _ in adj[u]:
            if dist[v] == UNREACHABLE:
                dist[v] = next_dist
                parent[v] = u
                queue.append(v)
    return BfsResult(dist=dist, parent=parent)


def dfs_recursive(graph: Graph, src: int) -> List[int]:
    """Depth-first discovery order using Python recursion.

    Deep graphs can exceed the interpreter recursion limit and raise
    RecursionError; use :func:`dfs_iterative` for those.

    Raises:
        KeyError: If ``src`` is not in the graph.
    """
    check_source(graph, src)
    adj = graph.adj
    visited = [False] * graph.n
    order: List[int] = []

    def _visit(u: int) -> None:
        visited[u] = True
        order.append(u)
        for v, _ in adj[u]:
            if not visited[v]:
                _visit(v)

    _visit(src)
    return order


def dfs_iterative(graph: Graph, src: int) -> List[int]:
    """Depth-first discovery order using an explicit stack.

    Raises:
        KeyError: If ``src`` is not in the graph.
    """
    check_source(graph, src)
    adj = graph.adj
    visited = [False] * graph.n
    order: List[int] = []
    stack = [src]
    while stack:
        u = stack.pop()
        if visited[u]:
            continue
        visited[u] = True
        order.append(u)
        for v, _ in reversed(adj[u]):
            if not visited[v]:
                stack.append(v)
    return order


def dfs(graph: Graph, src: int, mode: DfsMode = DfsMode.ITERATIVE) -> List[int]:
    """Depth-first discovery order from ``src``.

    Args:
        graph: Graph to traverse.
        src: Start vertex.
        mode: ``DfsMode.ITERATIVE`` (default) or ``DfsMode.RECURSIVE``.

    Returns:
        Vertices in the order they were first discovered.
    """
    if mode == DfsMode.RECURSIVE:
        return dfs_recursive(graph, src)
    return dfs_iterative(graph, src)


def topological_sort_kahn(graph: Graph) -> List[int]:
    """Topological order by repeatedly removing zero in-degree vertices.

    Zero in-degree vertices are processed first-in first-out, starting with
    the initial ones in ascending index order.

    Returns:
        A topological order, or ``[]`` if the graph has a cycle.
    """
    indeg = graph.in_degrees()
    adj = graph.adj
    queue = deque(u for u in range(graph.n) if indeg[u] == 0)
    order: List[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v, _ in adj[u]:
            indeg[v] -= 1
            if indeg[v] == 0:
                queue.append(v)

    if len(order) != graph.n:
        logger.debug(
            "Kahn topological sort: cycle detected, %d of %d vertices ordered",
            len(order),
            graph.n,
        )
        return []
    return order


def topological_sort_dfs(graph: Graph) -> List[int]:
    """Topological order as reversed DFS post-order.

    Vertices on the current DFS path are marked; reaching one of them again
    means a back edge, i.e. a cycle.

    Returns:
        A topological order, or ``[]`` if the graph has a cycle.
    """
    adj = graph.adj
    color = [_WHITE] * graph.n
    cursor = [0] * graph.n
    post_order: List[int] = []

    for root in range(graph.n):
        if color[root] != _WHITE:
            continue
        color[root] = _GRAY
        stack = [root]
        while stack:
            u = stack[-1]
            if cursor[u] < len(adj[u]):
                v = adj[u][cursor[u]][0]
                cursor[u] += 1
                if color[v] == _WHITE:
                    color[v] = _GRAY
                    stack.append(v)
                elif color[v] == _GRAY:
                    logger.debug("DFS topological sort: back edge %d -> %d", u, v)
                    return []
            else:
                stack.pop()
                color[u] = _BLACK
                post_order.append(u)

    post_order.reverse()
    return post_order


def topological_sort(graph: Graph, method: TopoMethod = TopoMethod.KAHN) -> List[int]:
    """Topological order of ``graph`` using the selected method.

    Returns:
        A topological order, or ``[]`` if the graph has a cycle.
    """
    if method == TopoMethod.DFS:
        return topological_sort_dfs(graph)
    return topological_sort_kahn(graph)


def has_cycle(graph: Graph) -> bool:
    """Return True if a directed graph contains a cycle.

    Raises:
        ValueError: If the graph is undirected.
    """
    if not graph.directed:
        raise ValueError(
            "Cycle detection via topological sort requires a directed graph."
        )
    return graph.n > 0 and not topological_sort_kahn(graph)
