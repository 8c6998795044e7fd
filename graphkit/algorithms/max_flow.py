"""Maximum flow via Dinic's blocking-flow algorithm.

`Dinic` owns a residual network: every added edge gets a forward arc with the
given capacity and a paired reverse arc starting at zero. Each phase builds a
BFS level graph from the source and then pushes augmenting paths that advance
exactly one level per arc. A per-vertex cursor remembers the next arc to try,
so dead ends are not rescanned within a phase. The search stops once the sink
is no longer reachable in the residual graph.

After ``max_flow`` the vertices reachable from the source in the residual
graph form the source side of a minimum cut; the saturated original edges
leaving that side sum to the flow value.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Literal, Set, Tuple, Union, overload

from graphkit.algorithms.base import Weight, check_source
from graphkit.algorithms.types import FlowEdgeID, FlowSummary
from graphkit.config import ALGORITHM_CONFIG
from graphkit.graph.adjacency import Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)


class _Arc:
    """Residual arc. ``rev`` indexes the paired arc in ``to``'s list."""

    __slots__ = ("to", "cap", "rev")

    def __init__(self, to: int, cap: Weight, rev: int) -> None:
        self.to = to
        self.cap = cap
        self.rev = rev


class Dinic:
    """Residual network with Dinic's max-flow.

    Example:
        >>> network = Dinic(4)
        >>> network.add_edge(0, 1, 3)
        0
        >>> network.add_edge(1, 3, 2)
        1
        >>> network.max_flow(0, 3)
        2
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}.")
        self.n: int = n
        self._arcs: List[List[_Arc]] = [[] for _ in range(n)]
        # Original edges: (u, index of forward arc in _arcs[u], capacity)
        self._edges: List[Tuple[int, int, Weight]] = []
        self._level: List[int] = [-1] * n
        # Flow pushed by all max_flow calls so far
        self._flow: Weight = 0

    def add_edge(self, u: int, v: int, capacity: Weight) -> FlowEdgeID:
        """Add a directed edge ``u -> v`` with the given capacity.

        Returns:
            Edge id usable with :meth:`flow_on`.

        Raises:
            ValueError: If a vertex is out of range or the capacity is negative.
        """
        if not 0 <= u < self.n or not 0 <= v < self.n:
            raise ValueError(
                f"Edge ({u}, {v}) has a vertex out of range [0, {self.n})."
            )
        if capacity < 0:
            raise ValueError(f"Capacity must be non-negative, got {capacity!r}.")

        forward = _Arc(v, capacity, len(self._arcs[v]) + (1 if u == v else 0))
        self._arcs[u].append(forward)
        backward = _Arc(u, 0, len(self._arcs[u]) - 1)
        self._arcs[v].append(backward)
        self._edges.append((u, len(self._arcs[u]) - 1, capacity))
        return len(self._edges) - 1

    def _build_levels(self, s: int, t: int) -> bool:
        eps = ALGORITHM_CONFIG.flow_tolerance
        level = [-1] * self.n
        level[s] = 0
        queue = deque([s])
        while queue:
            u = queue.popleft()
            for arc in self._arcs[u]:
                if arc.cap > eps and level[arc.to] == -1:
                    level[arc.to] = level[u] + 1
                    queue.append(arc.to)
        self._level = level
        return level[t] != -1

    def _augment(self, s: int, t: int, cursor: List[int]) -> Weight:
        """Push one augmenting path along the level graph; 0 if none is left."""
        eps = ALGORITHM_CONFIG.flow_tolerance
        level = self._level
        # (tail vertex, arc) pairs from s to the current vertex
        path: List[Tuple[int, _Arc]] = []
        u = s
        while True:
            if u == t:
                pushed = min(arc.cap for _, arc in path)
                for _, arc in path:
                    arc.cap -= pushed
                    self._arcs[arc.to][arc.rev].cap += pushed
                return pushed

            arcs = self._arcs[u]
            while cursor[u] < len(arcs):
                arc = arcs[cursor[u]]
                if arc.cap > eps and level[arc.to] == level[u] + 1:
                    break
                cursor[u] += 1
            else:
                # Dead end: retreat and skip the arc that led here
                if not path:
                    return 0
                u, _ = path.pop()
                cursor[u] += 1
                continue

            path.append((u, arc))
            u = arc.to

    def max_flow(self, s: int, t: int) -> Weight:
        """Compute the maximum ``s -> t`` flow.

        Flow accumulates on the residual network, so a second call with the
        same terminals returns 0. The running total is kept for :meth:`summary`.

        Raises:
            ValueError: If ``s`` or ``t`` is out of range.
        """
        if not 0 <= s < self.n or not 0 <= t < self.n:
            raise ValueError(f"Terminals ({s}, {t}) out of range [0, {self.n}).")
        if s == t:
            # Conservation forces zero net flow out of a vertex into itself
            self._level = [-1] * self.n
            self._level[s] = 0
            return 0

        total: Weight = 0
        phases = 0
        while self._build_levels(s, t):
            phases += 1
            cursor = [0] * self.n
            while True:
                pushed = self._augment(s, t, cursor)
                if not pushed:
                    break
                total += pushed
        self._flow += total
        logger.debug("Dinic %d -> %d: flow %s in %d phases", s, t, total, phases)
        return total

    def flow_on(self, edge_id: FlowEdgeID) -> Weight:
        """Return the flow currently carried by an original edge."""
        u, arc_idx, capacity = self._edges[edge_id]
        return capacity - self._arcs[u][arc_idx].cap

    def source_side(self) -> Set[int]:
        """Vertices reachable from the last source in the residual graph."""
        return {v for v in range(self.n) if self._level[v] != -1}

    def min_cut(self) -> List[Tuple[int, int, FlowEdgeID]]:
        """Original edges ``(u, v, edge_id)`` from the source side to the sink side."""
        side = self.source_side()
        cut = []
        for edge_id, (u, arc_idx, _) in enumerate(self._edges):
            v = self._arcs[u][arc_idx].to
            if u in side and v not in side:
                cut.append((u, v, edge_id))
        return cut

    def summary(self) -> FlowSummary:
        """Build a FlowSummary of the residual network.

        ``total_flow`` covers every :meth:`max_flow` call so far, matching the
        per-edge flows; ``reachable`` and ``min_cut`` refer to the last source.
        """
        edge_flow: Dict[FlowEdgeID, Weight] = {}
        residual_cap: Dict[FlowEdgeID, Weight] = {}
        for edge_id, (u, arc_idx, _) in enumerate(self._edges):
            edge_flow[edge_id] = self.flow_on(edge_id)
            residual_cap[edge_id] = self._arcs[u][arc_idx].cap
        return FlowSummary(
            total_flow=self._flow,
            edge_flow=edge_flow,
            residual_cap=residual_cap,
            reachable=self.source_side(),
            min_cut=self.min_cut(),
        )


# Overloads give precise return types for the ``return_summary`` flag.
@overload
def calc_max_flow(
    graph: Graph,
    src_node: int,
    dst_node: int,
    *,
    return_summary: Literal[False] = False,
) -> Weight: ...


@overload
def calc_max_flow(
    graph: Graph,
    src_node: int,
    dst_node: int,
    *,
    return_summary: Literal[True],
) -> Tuple[Weight, FlowSummary]: ...


def calc_max_flow(
    graph: Graph,
    src_node: int,
    dst_node: int,
    *,
    return_summary: bool = False,
) -> Union[Weight, Tuple[Weight, FlowSummary]]:
    """Compute max flow between two vertices of a graph.

    Edge weights are used as capacities. A directed edge becomes one residual
    edge; an undirected edge becomes two opposite residual edges with the same
    capacity. The summary's edge ids follow that construction order.

    Args:
        graph: Graph whose weights are non-negative capacities.
        src_node: Source vertex.
        dst_node: Sink vertex.
        return_summary: If True, also return a FlowSummary.

    Returns:
        Union[Weight, tuple]:
            - ``total_flow`` by default.
            - ``(total_flow, FlowSummary)`` if ``return_summary`` is True.

    Raises:
        KeyError: If a terminal is not in the graph.
        ValueError: If an edge weight is negative.

    Examples:
        >>> g = Graph(3, directed=True)
        >>> g.add_edge(0, 1, 10)
        0
        >>> g.add_edge(1, 2, 5)
        1
        >>> calc_max_flow(g, 0, 2)
        5
    """
    check_source(graph, src_node)
    check_source(graph, dst_node)

    network = Dinic(graph.n)
    for edge in graph.edges:
        network.add_edge(edge.src, edge.dst, edge.weight)
        if not graph.directed:
            network.add_edge(edge.dst, edge.src, edge.weight)

    total = network.max_flow(src_node, dst_node)
    if return_summary:
        return total, network.summary()
    return total
