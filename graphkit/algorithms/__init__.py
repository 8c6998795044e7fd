"""Graph algorithm families operating on :class:`graphkit.graph.Graph`."""

from graphkit.algorithms.base import INF, NO_VERTEX, UNREACHABLE, DfsMode, TopoMethod
from graphkit.algorithms.connectivity import (
    articulation_points,
    bridges,
    find_bridges_and_articulation_points,
    kosaraju_scc,
    tarjan_scc,
)
from graphkit.algorithms.lca import BinaryLifting
from graphkit.algorithms.max_flow import Dinic, calc_max_flow
from graphkit.algorithms.mst import DisjointSet, kruskal, prim
from graphkit.algorithms.paths import next_hop_path, reconstruct_path
from graphkit.algorithms.spf import (
    bellman_ford,
    dag_shortest_path,
    dijkstra,
    floyd_warshall,
    zero_one_bfs,
)
from graphkit.algorithms.traversal import (
    bfs,
    dfs,
    dfs_iterative,
    dfs_recursive,
    has_cycle,
    multi_source_bfs,
    topological_sort,
    topological_sort_dfs,
    topological_sort_kahn,
)
from graphkit.algorithms.types import (
    AllPairsShortestPaths,
    BellmanFordResult,
    BfsResult,
    BridgesResult,
    FlowSummary,
    ShortestPaths,
    SpanningTree,
)

__all__ = [
    # Sentinels and enums
    "INF",
    "NO_VERTEX",
    "UNREACHABLE",
    "DfsMode",
    "TopoMethod",
    # Traversal
    "bfs",
    "multi_source_bfs",
    "dfs",
    "dfs_iterative",
    "dfs_recursive",
    "topological_sort",
    "topological_sort_kahn",
    "topological_sort_dfs",
    "has_cycle",
    # Shortest paths
    "dijkstra",
    "zero_one_bfs",
    "bellman_ford",
    "dag_shortest_path",
    "floyd_warshall",
    "reconstruct_path",
    "next_hop_path",
    # Spanning trees
    "DisjointSet",
    "kruskal",
    "prim",
    # Connectivity
    "kosaraju_scc",
    "tarjan_scc",
    "find_bridges_and_articulation_points",
    "bridges",
    "articulation_points",
    # Ancestry
    "BinaryLifting",
    # Max-flow
    "Dinic",
    "calc_max_flow",
    # Results
    "AllPairsShortestPaths",
    "BellmanFordResult",
    "BfsResult",
    "BridgesResult",
    "FlowSummary",
    "ShortestPaths",
    "SpanningTree",
]
