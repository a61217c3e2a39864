"""Minimum spanning tree by Kruskal's algorithm."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from dsakit.dsu import DisjointSet


def kruskal(
    n: int, edges: Iterable[tuple[int, int, int]]
) -> tuple[list[tuple[int, int]], int]:
    """Return the chosen ``(u, v)`` edges and the total weight for vertices 1..n.

    Edges are given as ``(u, v, weight)`` and considered in order of
    ``(weight, u, v)``.
    """
    ordered = sorted(edges, key=lambda e: (e[2], e[0], e[1]))
    dsu = DisjointSet(range(1, n + 1))
    chosen: list[tuple[int, int]] = []
    total = 0
    for u, v, wt in ordered:
        if dsu.union(u, v):
            chosen.append((u, v))
            total += wt
    return chosen, total


def main(argv: list[str] | None = None) -> int:
    """Read a weighted graph from stdin and print its spanning tree and cost."""
    argparse.ArgumentParser(
        description="Print a minimum spanning tree of a graph read from stdin."
    ).parse_args(argv)
    tokens = iter(int(t) for t in sys.stdin.read().split())
    n = next(tokens)
    e = next(tokens)
    edges = [(next(tokens), next(tokens), next(tokens)) for _ in range(e)]
    chosen, total = kruskal(n, edges)
    for u, v in chosen:
        print(u, v)
    print(total)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())