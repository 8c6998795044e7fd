"""Base constants and enums for graph algorithms."""

from __future__ import annotations

from enum import IntEnum

from graphkit.graph.adjacency import Graph, Weight

#: Distance of a vertex no path reaches. Compares greater than any int or float.
INF: float = float("inf")

#: BFS hop distance of an unreachable vertex.
UNREACHABLE: int = -1

#: Placeholder for "no parent" / "no ancestor" / "no next hop".
NO_VERTEX: int = -1

__all__ = [
    "INF",
    "UNREACHABLE",
    "NO_VERTEX",
    "Weight",
    "DfsMode",
    "TopoMethod",
    "check_source",
]


class DfsMode(IntEnum):
    """DFS implementation strategy."""

    #: Explicit stack; safe for arbitrarily deep graphs.
    ITERATIVE = 1
    #: Python recursion; limited by ``sys.getrecursionlimit()``.
    RECURSIVE = 2


class TopoMethod(IntEnum):
    """Topological sort strategy."""

    #: In-degree counting with a FIFO queue.
    KAHN = 1
    #: Reversed DFS post-order with on-path cycle detection.
    DFS = 2

    @classmethod
    def from_string(cls, value: str) -> "TopoMethod":
        """Parse a case-insensitive method name.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid topological sort method '{value}'. Valid values are: {valid}"
            ) from None


def check_source(graph: Graph, src: int) -> None:
    """Raise KeyError if ``src`` is not a vertex of ``graph``."""
    if src not in graph:
        raise KeyError(f"Source vertex {src!r} is not in the graph.")
