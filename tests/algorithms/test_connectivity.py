import networkx as nx
import pytest

from graphkit.algorithms.connectivity import (
    articulation_points,
    bridges,
    find_bridges_and_articulation_points,
    kosaraju_scc,
    tarjan_scc,
)
from graphkit.graph.adjacency import Graph
from graphkit.graph.convert import from_networkx


def _as_sets(components):
    return {frozenset(c) for c in components}


class TestSCC:
    def test_scc_graph(self, scc_graph):
        expected = {frozenset({0, 1, 2}), frozenset({3}), frozenset({4})}
        assert _as_sets(kosaraju_scc(scc_graph)) == expected
        assert _as_sets(tarjan_scc(scc_graph)) == expected

    def test_dag_is_all_singletons(self, diamond_dag):
        for components in (kosaraju_scc(diamond_dag), tarjan_scc(diamond_dag)):
            assert sorted(len(c) for c in components) == [1, 1, 1, 1]

    def test_tarjan_reverse_topological(self, line4):
        assert tarjan_scc(line4) == [[3], [2], [1], [0]]

    def test_components_partition_vertices(self, scc_graph):
        for components in (kosaraju_scc(scc_graph), tarjan_scc(scc_graph)):
            assert sorted(v for c in components for v in c) == list(range(5))

    def test_empty_graph(self):
        assert kosaraju_scc(Graph(0, directed=True)) == []
        assert tarjan_scc(Graph(0, directed=True)) == []

    def test_deep_cycle(self):
        n = 5000
        g = Graph(n, directed=True)
        for u in range(n):
            g.add_edge(u, (u + 1) % n)
        assert len(kosaraju_scc(g)) == 1
        assert len(tarjan_scc(g)) == 1

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_networkx(self, seed):
        nx_graph = nx.gnm_random_graph(15, 25, seed=seed, directed=True)
        graph, node_map = from_networkx(nx_graph)
        expected = {
            frozenset(c) for c in nx.strongly_connected_components(nx_graph)
        }
        for components in (kosaraju_scc(graph), tarjan_scc(graph)):
            assert {frozenset(node_map.names(c)) for c in components} == expected


class TestBridges:
    def test_two_triangles(self, two_triangles):
        result = find_bridges_and_articulation_points(two_triangles)
        assert result.bridges == [(2, 3)]
        assert result.articulation_points == [2, 3]

    def test_wrappers(self, two_triangles):
        assert bridges(two_triangles) == [(2, 3)]
        assert articulation_points(two_triangles) == [2, 3]

    def test_path(self):
        g = Graph(3)
        g.add_edge(0, 1)
        g.add_edge(1, 2)
        result = find_bridges_and_articulation_points(g)
        assert set(result.bridges) == {(0, 1), (1, 2)}
        assert result.articulation_points == [1]

    def test_parallel_edges_are_not_bridges(self):
        g = Graph(2)
        g.add_edge(0, 1)
        g.add_edge(0, 1)
        assert bridges(g) == []

    def test_single_edge(self):
        g = Graph(2)
        g.add_edge(0, 1)
        result = find_bridges_and_articulation_points(g)
        assert result.bridges == [(0, 1)]
        assert result.articulation_points == []

    def test_star_center(self):
        g = Graph(4)
        for leaf in (1, 2, 3):
            g.add_edge(0, leaf)
        assert articulation_points(g) == [0]
        assert len(bridges(g)) == 3

    def test_self_loop_ignored(self):
        g = Graph(2)
        g.add_edge(0, 0)
        g.add_edge(0, 1)
        assert bridges(g) == [(0, 1)]

    def test_rejects_directed(self, line4):
        with pytest.raises(ValueError):
            find_bridges_and_articulation_points(line4)

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_networkx(self, seed):
        nx_graph = nx.gnm_random_graph(14, 18, seed=seed)
        graph, node_map = from_networkx(nx_graph)
        result = find_bridges_and_articulation_points(graph)

        found = {frozenset(node_map.names([u, v])) for u, v in result.bridges}
        assert found == {frozenset(e) for e in nx.bridges(nx_graph)}
        assert set(node_map.names(result.articulation_points)) == set(
            nx.articulation_points(nx_graph)
        )
