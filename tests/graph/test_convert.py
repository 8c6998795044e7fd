import networkx as nx
import pytest

from graphkit.algorithms.spf import dijkstra
from graphkit.graph.adjacency import Graph
from graphkit.graph.convert import NodeMap, from_networkx, to_networkx


def test_node_map_from_names():
    node_map = NodeMap.from_names(["A", "B", "C"])
    assert len(node_map) == 3
    assert node_map.to_index["C"] == 2
    assert node_map.names([2, 0]) == ["C", "A"]


def test_from_digraph():
    G = nx.DiGraph()
    G.add_edge("B", "C", weight=5)
    G.add_edge("A", "B", weight=10)
    G.add_node("D")

    graph, node_map = from_networkx(G)
    assert graph.directed
    assert graph.n == 4
    assert node_map.to_index == {"A": 0, "B": 1, "C": 2, "D": 3}
    assert graph.adj[0] == [(1, 10)]
    assert graph.adj[1] == [(2, 5)]
    assert graph.adj[3] == []


def test_from_undirected_graph_default_weight():
    G = nx.Graph()
    G.add_edge("x", "y")
    graph, _ = from_networkx(G, default_weight=3)
    assert not graph.directed
    assert graph.adj == [[(1, 3)], [(0, 3)]]


def test_custom_weight_attr():
    G = nx.DiGraph()
    G.add_edge(0, 1, cost=4, weight=100)
    graph, _ = from_networkx(G, weight_attr="cost")
    assert graph.adj[0] == [(1, 4)]


def test_multigraph_keeps_parallel_edges_and_keys():
    G = nx.MultiDiGraph()
    G.add_edge("A", "B", key="fast", weight=1)
    G.add_edge("A", "B", key="slow", weight=9)
    graph, _ = from_networkx(G)
    assert graph.num_edges == 2
    assert {e.key for e in graph.edges} == {"fast", "slow"}
    assert dijkstra(graph, 0).dist == [0, 1]


def test_rejects_non_networkx():
    with pytest.raises(TypeError):
        from_networkx({"A": ["B"]})


def test_to_networkx_with_names():
    graph = Graph(3, directed=True)
    graph.add_edge(0, 1, 2)
    graph.add_edge(1, 2, 3, key="k")
    node_map = NodeMap.from_names(["A", "B", "C"])

    G = to_networkx(graph, node_map)
    assert isinstance(G, nx.MultiDiGraph)
    assert set(G.nodes) == {"A", "B", "C"}
    assert G["B"]["C"]["k"]["weight"] == 3
    assert nx.shortest_path_length(G, "A", "C", weight="weight") == 5


def test_roundtrip_undirected():
    graph = Graph(4)
    for u, v, w in [(0, 1, 1), (1, 2, 2), (2, 3, 3), (3, 0, 4), (0, 1, 5)]:
        graph.add_edge(u, v, w)

    G = to_networkx(graph)
    assert isinstance(G, nx.MultiGraph)
    assert G.number_of_edges() == 5

    back, node_map = from_networkx(G)
    assert not back.directed
    assert node_map.to_index == {0: 0, 1: 1, 2: 2, 3: 3}
    assert sorted(e.weight for e in back.edges) == [1, 2, 3, 4, 5]
    assert dijkstra(back, 0).dist == dijkstra(graph, 0).dist
