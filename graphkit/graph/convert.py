"""NetworkX graph conversion utilities.

Converts between NetworkX graphs (arbitrary hashable node names) and
:class:`~graphkit.graph.adjacency.Graph` (dense integer vertices).

Example:
    >>> import networkx as nx
    >>> from graphkit.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=10)
    >>> G.add_edge("B", "C", weight=5)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_index["B"]
    1
    >>>
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Tuple, Union

import networkx as nx

from graphkit.graph.adjacency import Graph, Weight

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to integer indices.
        to_name: Maps integer indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names given in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self, indices: List[int]) -> List[Hashable]:
        """Translate a list of vertex indices back to node names."""
        return [self.to_name[i] for i in indices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: Weight = 1,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a :class:`Graph`.

    Node names are sorted by their string form and numbered from 0, so the
    result does not depend on NetworkX insertion order. Directedness follows
    ``G``. Parallel edges of multigraphs are preserved; the NetworkX edge key
    becomes :attr:`Edge.key`.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.

    Returns:
        Tuple of ``(graph, node_map)``.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(sorted(G.nodes(), key=str))
    graph = Graph(len(node_map), directed=G.is_directed())

    if G.is_multigraph():
        edges_iter = G.edges(keys=True, data=True)
    else:
        edges_iter = ((u, v, None, d) for u, v, d in G.edges(data=True))

    for u, v, key, data in edges_iter:
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            data.get(weight_attr, default_weight),
            key,
        )
    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> Any:
    """Convert a :class:`Graph` to a NetworkX multigraph.

    Args:
        graph: Graph to convert.
        node_map: Optional mapping restoring original node names. If None,
            nodes are labeled ``0..n-1``.
        weight_attr: Edge attribute name to store weights under.

    Returns:
        ``nx.MultiDiGraph`` for directed graphs, ``nx.MultiGraph`` otherwise.
    """
    G = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G.add_nodes_from(name(i) for i in range(graph.n))
    for edge in graph.edges:
        G.add_edge(
            name(edge.src),
            name(edge.dst),
            key=edge.key,
            **{weight_attr: edge.weight},
        )
    return G
