"""GraphKit: static graph algorithms over dense integer vertices.

GraphKit builds a graph once and runs any number of algorithms against it:
traversals, shortest paths, spanning trees, connectivity structure, tree
ancestry queries and maximum flow.

Primary API:
    Graph - adjacency-list graph with vertices ``0..n-1``
    bfs(), dfs(), topological_sort() - traversals
    dijkstra(), bellman_ford(), floyd_warshall(), ... - shortest paths
    kruskal(), prim() - minimum spanning trees
    tarjan_scc(), kosaraju_scc(), find_bridges_and_articulation_points()
    BinaryLifting - LCA and k-th ancestor queries
    Dinic, calc_max_flow() - maximum flow
    from_networkx(), to_networkx() - NetworkX interop

Example:
    from graphkit import Graph, dijkstra, kruskal

    g = Graph(4)
    for u, v, w in [(0, 1, 1), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 1)]:
        g.add_edge(u, v, w)

    dijkstra(g, 0).dist      # [0, 1, 3, 4]
    kruskal(g).total_weight  # 4
"""

from __future__ import annotations

from graphkit import logging
from graphkit._version import __version__
from graphkit.algorithms import (
    INF,
    NO_VERTEX,
    UNREACHABLE,
    AllPairsShortestPaths,
    BellmanFordResult,
    BfsResult,
    BinaryLifting,
    BridgesResult,
    DfsMode,
    Dinic,
    DisjointSet,
    FlowSummary,
    ShortestPaths,
    SpanningTree,
    TopoMethod,
    articulation_points,
    bellman_ford,
    bfs,
    bridges,
    calc_max_flow,
    dag_shortest_path,
    dfs,
    dijkstra,
    find_bridges_and_articulation_points,
    floyd_warshall,
    has_cycle,
    kosaraju_scc,
    kruskal,
    multi_source_bfs,
    prim,
    reconstruct_path,
    tarjan_scc,
    topological_sort,
    zero_one_bfs,
)
from graphkit.config import ALGORITHM_CONFIG, AlgorithmConfig
from graphkit.graph import Edge, Graph
from graphkit.graph.convert import NodeMap, from_networkx, to_networkx

__all__ = [
    # Version
    "__version__",
    # Graph store
    "Graph",
    "Edge",
    # NetworkX interop
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Configuration
    "AlgorithmConfig",
    "ALGORITHM_CONFIG",
    # Utilities
    "logging",
    # Sentinels and enums
    "INF",
    "NO_VERTEX",
    "UNREACHABLE",
    "DfsMode",
    "TopoMethod",
    # Algorithms
    "bfs",
    "multi_source_bfs",
    "dfs",
    "topological_sort",
    "has_cycle",
    "dijkstra",
    "zero_one_bfs",
    "bellman_ford",
    "dag_shortest_path",
    "floyd_warshall",
    "reconstruct_path",
    "DisjointSet",
    "kruskal",
    "prim",
    "kosaraju_scc",
    "tarjan_scc",
    "find_bridges_and_articulation_points",
    "bridges",
    "articulation_points",
    "BinaryLifting",
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
