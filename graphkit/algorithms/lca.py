"""Lowest common ancestor and k-th ancestor queries by binary lifting.

``up[k][v]`` stores the ``2**k``-th ancestor of ``v`` (``NO_VERTEX`` above the
root). Both queries then take O(log n) jumps.

Example:
    >>> tree = Graph(5)
    >>> for u, v in [(0, 1), (0, 2), (1, 3), (1, 4)]:
    ...     tree.add_edge(u, v)
    >>> lifting = BinaryLifting.from_tree(tree, root=0)
    >>> lifting.lca(3, 4)
    1
    >>> lifting.kth_ancestor(4, 2)
    0
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Union

from graphkit.algorithms.base import NO_VERTEX
from graphkit.graph.adjacency import Graph

TreeInput = Union[Graph, Sequence[Sequence[int]]]


def _tree_neighbors(tree: TreeInput) -> List[List[int]]:
    if isinstance(tree, Graph):
        return [[v for v, _ in arcs] for arcs in tree.adj]
    return [list(children) for children in tree]


class BinaryLifting:
    """Ancestor table of a rooted tree.

    The tree may be given as an undirected :class:`Graph` or as an adjacency
    list of ints (edges listed in either or both directions). Vertices not
    reachable from the root keep depth 0 and have no ancestors.

    Attributes:
        root: Root vertex used by the last :meth:`build`.
        log: Number of ancestor levels kept (``2**log > n``).
    """

    def __init__(self) -> None:
        self.root: Optional[int] = None
        self.log: int = 0
        self._n: int = 0
        self._depth: List[int] = []
        self._up: List[List[int]] = []

    @classmethod
    def from_tree(cls, tree: TreeInput, root: int = 0) -> BinaryLifting:
        """Construct and build in one step."""
        lifting = cls()
        lifting.build(tree, root)
        return lifting

    @property
    def ready(self) -> bool:
        return self.root is not None

    def build(self, tree: TreeInput, root: int = 0) -> None:
        """Compute depths and the ancestor table.

        Args:
            tree: Tree as a Graph or an adjacency list.
            root: Root vertex.

        Raises:
            ValueError: If ``root`` is out of range.
        """
        neighbors = _tree_neighbors(tree)
        n = len(neighbors)
        if not 0 <= root < n:
            raise ValueError(f"Root {root!r} is out of range [0, {n}).")

        log = 1
        while (1 << log) <= n:
            log += 1

        depth = [0] * n
        parent = [NO_VERTEX] * n
        visited = [False] * n
        visited[root] = True
        stack = [root]
        while stack:
            u = stack.pop()
            for v in neighbors[u]:
                if not visited[v]:
                    visited[v] = True
                    parent[v] = u
                    depth[v] = depth[u] + 1
                    stack.append(v)

        up = [parent]
        for k in range(1, log):
            prev = up[k - 1]
            up.append([NO_VERTEX if p == NO_VERTEX else prev[p] for p in prev])

        self._n = n
        self.log = log
        self._depth = depth
        self._up = up
        self.root = root

    def _check(self, *vertices: int) -> None:
        if not self.ready:
            raise RuntimeError("BinaryLifting queried before build().")
        for v in vertices:
            if not 0 <= v < self._n:
                raise ValueError(f"Vertex {v!r} is out of range [0, {self._n}).")

    def depth(self, v: int) -> int:
        """Return the number of edges between ``v`` and the root."""
        self._check(v)
        return self._depth[v]

    def kth_ancestor(self, v: int, k: int) -> int:
        """Return the ancestor ``k`` levels above ``v``.

        Returns:
            The ancestor vertex, ``v`` itself for ``k == 0``, or ``NO_VERTEX``
            if ``k`` exceeds the depth of ``v``.

        Raises:
            RuntimeError: If called before :meth:`build`.
            ValueError: If ``v`` is out of range or ``k`` is negative.
        """
        self._check(v)
        if k < 0:
            raise ValueError(f"Ancestor distance must be non-negative, got {k}.")
        if k > self._depth[v]:
            return NO_VERTEX
        bit = 0
        while k and v != NO_VERTEX:
            if k & 1:
                v = self._up[bit][v]
            k >>= 1
            bit += 1
        return v

    def lca(self, a: int, b: int) -> int:
        """Return the lowest common ancestor of ``a`` and ``b``.

        The deeper vertex is first lifted to the other's depth; then both jump
        together by decreasing powers of two while their ancestors differ.

        Returns:
            The LCA, or ``NO_VERTEX`` if the vertices lie in different trees.

        Raises:
            RuntimeError: If called before :meth:`build`.
            ValueError: If a vertex is out of range.
        """
        self._check(a, b)
        if self._depth[a] < self._depth[b]:
            a, b = b, a
        a = self.kth_ancestor(a, self._depth[a] - self._depth[b])
        if a == b:
            return a
        for k in range(self.log - 1, -1, -1):
            if self._up[k][a] != self._up[k][b]:
                a = self._up[k][a]
                b = self._up[k][b]
        return self._up[0][a]

    def distance(self, a: int, b: int) -> int:
        """Return the number of tree edges between ``a`` and ``b``.

        Raises:
            ValueError: If the vertices lie in different trees.
        """
        ancestor = self.lca(a, b)
        if ancestor == NO_VERTEX:
            raise ValueError(f"Vertices {a} and {b} are not in the same tree.")
        return self._depth[a] + self._depth[b] - 2 * self._depth[ancestor]
