"""Connectivity structure: strongly connected components, bridges and cut vertices.

All routines run in O(V + E) with explicit stacks, so graph depth is not limited
by the interpreter recursion limit. Component lists are returned in discovery
order, but only membership is meaningful: Kosaraju and Tarjan produce the same
partition, not necessarily in the same order.
"""

from __future__ import annotations

from typing import List, Tuple

from graphkit.algorithms.types import BridgesResult
from graphkit.graph.adjacency import Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)


def kosaraju_scc(graph: Graph) -> List[List[int]]:
    """Strongly connected components via two DFS passes.

    The first pass records vertices by DFS finishing time on ``graph``. The
    second pass walks the transpose graph, taking roots in reverse finishing
    order; every tree it grows is one component.

    Returns:
        List of components, each a list of vertices.
    """
    n = graph.n
    adj = graph.adj

    finish_order: List[int] = []
    visited = [False] * n
    cursor = [0] * n
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [root]
        while stack:
            u = stack[-1]
            if cursor[u] < len(adj[u]):
                v = adj[u][cursor[u]][0]
                cursor[u] += 1
                if not visited[v]:
                    visited[v] = True
                    stack.append(v)
            else:
                stack.pop()
                finish_order.append(u)

    rev_adj = graph.reverse().adj
    assigned = [False] * n
    components: List[List[int]] = []
    for root in reversed(finish_order):
        if assigned[root]:
            continue
        assigned[root] = True
        component: List[int] = []
        stack = [root]
        while stack:
            u = stack.pop()
            component.append(u)
            for v, _ in rev_adj[u]:
                if not assigned[v]:
                    assigned[v] = True
                    stack.append(v)
        components.append(component)

    logger.debug("Kosaraju: %d components over %d vertices", len(components), n)
    return components


def tarjan_scc(graph: Graph) -> List[List[int]]:
    """Strongly connected components via a single low-link DFS.

    Vertices enter an explicit component stack on discovery. When a vertex
    finishes with ``low == index`` it is the root of a component, and the stack
    is popped down to it.

    Returns:
        List of components in reverse topological order of the condensation.
    """
    n = graph.n
    adj = graph.adj
    index = [-1] * n
    low = [0] * n
    on_stack = [False] * n
    cursor = [0] * n
    scc_stack: List[int] = []
    components: List[List[int]] = []
    counter = 0

    for root in range(n):
        if index[root] != -1:
            continue
        index[root] = low[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack[root] = True
        call_stack = [root]

        while call_stack:
            u = call_stack[-1]
            if cursor[u] < len(adj[u]):
                v = adj[u][cursor[u]][0]
                cursor[u] += 1
                if index[v] == -1:
                    index[v] = low[v] = counter
                    counter += 1
                    scc_stack.append(v)
                    on_stack[v] = True
                    call_stack.append(v)
                elif on_stack[v]:
                    low[u] = min(low[u], index[v])
                continue

            call_stack.pop()
            if call_stack:
                caller = call_stack[-1]
                low[caller] = min(low[caller], low[u])
            if low[u] == index[u]:
                component: List[int] = []
                while True:
                    w = scc_stack.pop()
                    on_stack[w] = False
                    component.append(w)
                    if w == u:
                        break
                components.append(component)

    logger.debug("Tarjan: %d components over %d vertices", len(components), n)
    return components


def find_bridges_and_articulation_points(graph: Graph) -> BridgesResult:
    """Bridges and articulation points of an undirected graph.

    Uses DFS entry times ``tin`` and low-links ``low``. For a tree edge
    ``(u, v)``:

    - it is a bridge iff ``low[v] > tin[u]``;
    - ``u`` is an articulation point iff ``u`` is not a DFS root and
      ``low[v] >= tin[u]``.

    A DFS root is an articulation point iff it has two or more tree children.
    Only the edge a vertex was discovered through is skipped when computing
    low-links, so parallel edges are never bridges.

    Raises:
        ValueError: If the graph is directed.
    """
    if graph.directed:
        raise ValueError(
            "Bridge and articulation point search requires an undirected graph."
        )

    n = graph.n
    incident = [list(graph.incident(u)) for u in range(n)]
    tin = [-1] * n
    low = [0] * n
    parent_edge = [-1] * n
    cursor = [0] * n
    is_articulation = [False] * n
    bridge_list: List[Tuple[int, int]] = []
    timer = 0

    for root in range(n):
        if tin[root] != -1:
            continue
        tin[root] = low[root] = timer
        timer += 1
        root_children = 0
        call_stack = [root]

        while call_stack:
            u = call_stack[-1]
            if cursor[u] < len(incident[u]):
                v, _, edge_idx = incident[u][cursor[u]]
                cursor[u] += 1
                if edge_idx == parent_edge[u]:
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                else:
                    parent_edge[v] = edge_idx
                    tin[v] = low[v] = timer
                    timer += 1
                    if u == root:
                        root_children += 1
                    call_stack.append(v)
                continue

            call_stack.pop()
            if call_stack:
                p = call_stack[-1]
                low[p] = min(low[p], low[u])
                if low[u] > tin[p]:
                    bridge_list.append((p, u))
                if p != root and low[u] >= tin[p]:
                    is_articulation[p] = True

        if root_children > 1:
            is_articulation[root] = True

    articulation_points = [v for v in range(n) if is_articulation[v]]
    return BridgesResult(bridges=bridge_list, articulation_points=articulation_points)


def bridges(graph: Graph) -> List[Tuple[int, int]]:
    """Return the bridges of an undirected graph."""
    return find_bridges_and_articulation_points(graph).bridges


def articulation_points(graph: Graph) -> List[int]:
    """Return the articulation points of an undirected graph in ascending order."""
    return find_bridges_and_articulation_points(graph).articulation_points
