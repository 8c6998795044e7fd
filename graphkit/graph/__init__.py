"""Graph primitives and helpers.

This package provides the adjacency-list `Graph` over dense integer vertices
and NetworkX conversion helpers (`convert`).
"""

from graphkit.graph.adjacency import Arc, Edge, Graph, Weight

__all__ = ["Arc", "Edge", "Graph", "Weight"]
