"""Disjoint-set union with path compression and union by size."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Hashable, Iterable


class DisjointSet:
    """A forest of disjoint sets over hashable elements."""

    def __init__(self, elements: Iterable[Hashable] = ()) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        for v in elements:
            self.make(v)

    def make(self, v: Hashable) -> None:
        """Put ``v`` into a set of its own."""
        self._parent[v] = v
        self._size[v] = 1

    def find(self, v: Hashable) -> Hashable:
        """Return the representative of the set holding ``v``."""
        parent = self._parent
        if v not in parent:
            raise KeyError(v)
        root = v
        while parent[root] != root:
            root = parent[root]
        while parent[v] != root:
            parent[v], v = root, parent[v]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets holding ``a`` and ``b``; return whether they were apart."""
        a = self.find(a)
        b = self.find(b)
        if a == b:
            return False
        if self._size[a] < self._size[b]:
            a, b = b, a
        self._parent[b] = a
        self._size[a] += self._size[b]
        return True

    def size_of(self, v: Hashable) -> int:
        """Return the number of elements in the set holding ``v``."""
        return self._size[self.find(v)]

    def __contains__(self, v: object) -> bool:
        return v in self._parent

    def __len__(self) -> int:
        return len(self._parent)


def count_components(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Count connected components of a graph on vertices 1..n."""
    dsu = DisjointSet(range(1, n + 1))
    for u, v in edges:
        dsu.union(u, v)
    return sum(1 for i in range(1, n + 1) if dsu.find(i) == i)


def main(argv: list[str] | None = None) -> int:
    """Read ``n e`` and ``e`` edges from stdin and print the component count."""
    argparse.ArgumentParser(
        description="Count connected components of a graph read from stdin."
    ).parse_args(argv)
    tokens = iter(int(t) for t in sys.stdin.read().split())
    n = next(tokens)
    e = next(tokens)
    edges = [(next(tokens), next(tokens)) for _ in range(e)]
    print(count_components(n, edges))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())