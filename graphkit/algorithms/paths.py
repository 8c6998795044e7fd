"""Path reconstruction from parent arrays and next-hop matrices."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from graphkit.algorithms.base import NO_VERTEX


def reconstruct_path(parent: Sequence[int], target: int) -> List[int]:
    """Walk ``parent`` pointers back from ``target`` and return the path.

    The path starts at the root of ``target``'s tree (a vertex whose parent is
    ``NO_VERTEX``) and ends at ``target``. The caller decides whether
    ``target`` was reached; an unreachable target yields ``[target]``.

    Args:
        parent: Parent array as returned by BFS/Dijkstra/Bellman-Ford.
        target: Last vertex of the path.

    Returns:
        List of vertices from the root to ``target``; ``[]`` if ``target`` is
        negative.

    Raises:
        ValueError: If the parent pointers form a cycle.
    """
    path: List[int] = []
    if target < 0:
        return path
    v = target
    while v != NO_VERTEX:
        path.append(v)
        if len(path) > len(parent):
            raise ValueError("Parent pointers contain a cycle.")
        v = parent[v]
    path.reverse()
    return path


def next_hop_path(next_hop: np.ndarray, u: int, v: int) -> List[int]:
    """Follow a Floyd-Warshall next-hop matrix from ``u`` to ``v``.

    Returns:
        Vertex list ``[u, ..., v]``; ``[]`` if ``v`` is unreachable from ``u``.

    Raises:
        ValueError: If the walk does not terminate, which happens when a
            negative cycle lies on the path.
    """
    if next_hop[u][v] == NO_VERTEX:
        return []
    path = [u]
    n = len(next_hop)
    while u != v:
        u = int(next_hop[u][v])
        path.append(u)
        if len(path) > n:
            raise ValueError("Next-hop walk does not terminate (negative cycle).")
    return path
