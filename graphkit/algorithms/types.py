"""Result containers for algorithm outputs.

Every algorithm returns a fresh, immutable container. Containers hold plain
lists (or numpy arrays for all-pairs results) that belong to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

import numpy as np

from graphkit.algorithms.base import INF, UNREACHABLE, Weight
from graphkit.algorithms.paths import next_hop_path
from graphkit.graph.adjacency import Edge

# Residual-network arc identifier: index returned by ``Dinic.add_edge``
FlowEdgeID = int


@dataclass(frozen=True)
class BfsResult:
    """Hop distances and BFS-tree parents.

    Attributes:
        dist: Hop count per vertex, ``UNREACHABLE`` (-1) if not reached.
        parent: BFS-tree parent per vertex, ``NO_VERTEX`` for sources and
            unreachable vertices.
    """

    dist: List[int]
    parent: List[int]

    def reachable(self, v: int) -> bool:
        return self.dist[v] != UNREACHABLE


@dataclass(frozen=True)
class ShortestPaths:
    """Single-source weighted distances.

    Attributes:
        dist: Distance per vertex, ``INF`` if unreachable.
        parent: Predecessor on one shortest path, ``NO_VERTEX`` if none.
    """

    dist: List[Weight]
    parent: List[int]

    def reachable(self, v: int) -> bool:
        return self.dist[v] != INF


@dataclass(frozen=True)
class BellmanFordResult(ShortestPaths):
    """Bellman-Ford output.

    When ``has_negative_cycle`` is True, distances of vertices on or behind the
    cycle are not meaningful.
    """

    has_negative_cycle: bool = False


@dataclass(frozen=True, eq=False)
class AllPairsShortestPaths:
    """All-pairs distances with a next-hop matrix.

    Attributes:
        dist: ``n x n`` float matrix; ``inf`` where unreachable.
        next_hop: ``n x n`` int matrix; first vertex after ``i`` on a shortest
            ``i -> j`` path, ``NO_VERTEX`` where unreachable.
        has_negative_cycle: True if some vertex reaches itself at negative cost.
    """

    dist: np.ndarray
    next_hop: np.ndarray
    has_negative_cycle: bool = False

    def path(self, u: int, v: int) -> List[int]:
        """Return the vertex sequence of a shortest ``u -> v`` path, or ``[]``."""
        return next_hop_path(self.next_hop, u, v)


@dataclass(frozen=True)
class SpanningTree:
    """Minimum spanning tree (or forest) result.

    Attributes:
        total_weight: Sum of accepted edge weights.
        edges: Accepted edges. Kruskal reports ``src < dst``; Prim reports
            ``(parent, child)``.
        connected: False if the graph is disconnected and ``edges`` spans only
            part of it.
    """

    total_weight: Weight
    edges: List[Edge]
    connected: bool


@dataclass(frozen=True)
class BridgesResult:
    """Bridges and articulation points of an undirected graph.

    Attributes:
        bridges: Tree edges ``(u, v)`` whose removal disconnects ``v``'s subtree.
        articulation_points: Cut vertices in ascending order.
    """

    bridges: List[Tuple[int, int]]
    articulation_points: List[int]


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value.
        edge_flow: Flow per original edge, indexed by ``Dinic.add_edge`` id.
        residual_cap: Remaining capacity per original edge.
        reachable: Vertices reachable from the source in the residual graph.
        min_cut: Original edges ``(u, v, edge_id)`` crossing the s-t cut.
    """

    total_flow: Weight
    edge_flow: Dict[FlowEdgeID, Weight]
    residual_cap: Dict[FlowEdgeID, Weight]
    reachable: Set[int] = field(default_factory=set)
    min_cut: List[Tuple[int, int, FlowEdgeID]] = field(default_factory=list)


__all__ = [
    "AllPairsShortestPaths",
    "BellmanFordResult",
    "BfsResult",
    "BridgesResult",
    "FlowEdgeID",
    "FlowSummary",
    "ShortestPaths",
    "SpanningTree",
]
