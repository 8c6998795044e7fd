import random

import networkx as nx
import pytest

from graphkit.algorithms.mst import DisjointSet, kruskal, prim
from graphkit.graph.adjacency import Edge, Graph
from graphkit.graph.convert import to_networkx


class TestDisjointSet:
    def test_union_and_find(self):
        dsu = DisjointSet(5)
        assert dsu.num_sets == 5
        assert dsu.union(0, 1)
        assert dsu.union(1, 2)
        assert not dsu.union(0, 2)
        assert dsu.num_sets == 3
        assert dsu.connected(0, 2)
        assert not dsu.connected(0, 3)
        assert dsu.find(2) == dsu.find(0)

    def test_long_chain(self):
        dsu = DisjointSet(1000)
        for i in range(999):
            dsu.union(i, i + 1)
        assert dsu.num_sets == 1
        assert all(dsu.find(i) == dsu.find(0) for i in range(1000))


class TestKruskal:
    def test_kruskal_square(self, mst_square):
        tree = kruskal(mst_square)
        assert tree.total_weight == 4
        assert tree.connected
        assert tree.edges == [Edge(0, 1, 1), Edge(2, 3, 1), Edge(1, 2, 2)]

    def test_kruskal_rejects_directed(self, weighted_digraph):
        with pytest.raises(ValueError):
            kruskal(weighted_digraph)

    def test_kruskal_forest(self, caplog):
        g = Graph(4)
        g.add_edge(0, 1, 3)
        g.add_edge(2, 3, 2)
        tree = kruskal(g)
        assert not tree.connected
        assert tree.total_weight == 5
        assert len(tree.edges) == 2
        assert "disconnected (2 components)" in caplog.text

    def test_kruskal_canonical_endpoints(self):
        g = Graph(3)
        g.add_edge(2, 0, 1)
        g.add_edge(1, 2, 1)
        tree = kruskal(g)
        assert all(e.src < e.dst for e in tree.edges)

    def test_empty_and_single(self):
        assert kruskal(Graph(0)).connected
        tree = kruskal(Graph(1))
        assert tree.connected
        assert tree.edges == []


class TestPrim:
    def test_prim_square(self, mst_square):
        tree = prim(mst_square)
        assert tree.total_weight == 4
        assert tree.connected
        assert tree.edges == [Edge(0, 1, 1), Edge(1, 2, 2), Edge(2, 3, 1)]

    def test_prim_other_start(self, mst_square):
        assert prim(mst_square, start=3).total_weight == 4

    def test_prim_rejects_directed(self, weighted_digraph):
        with pytest.raises(ValueError):
            prim(weighted_digraph)

    def test_prim_bad_start(self, mst_square):
        with pytest.raises(KeyError):
            prim(mst_square, start=9)

    def test_prim_disconnected(self):
        g = Graph(4)
        g.add_edge(0, 1, 3)
        g.add_edge(2, 3, 2)
        tree = prim(g)
        assert not tree.connected
        assert tree.edges == [Edge(0, 1, 3)]

    def test_prim_empty(self):
        tree = prim(Graph(0))
        assert tree.connected
        assert tree.total_weight == 0


@pytest.mark.parametrize("seed", range(5))
def test_kruskal_and_prim_agree_with_networkx(seed):
    rng = random.Random(seed)
    n = 12
    g = Graph(n)
    # A path keeps the graph connected; random chords add choice
    for u in range(n - 1):
        g.add_edge(u, u + 1, rng.randint(1, 20))
    for _ in range(20):
        g.add_edge(rng.randrange(n), rng.randrange(n), rng.randint(1, 20))

    expected = nx.minimum_spanning_tree(to_networkx(g)).size(weight="weight")
    assert kruskal(g).total_weight == expected
    assert prim(g).total_weight == expected
