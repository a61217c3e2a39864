"""Counting sort and two-sum pair search over integer lists."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable


def counting_sort(values: Iterable[int]) -> list[int]:
    """Return ``values`` in ascending order, sorted by counting occurrences."""
    counts = Counter(values)
    if not counts:
        return []
    result: list[int] = []
    for v in range(min(counts), max(counts) + 1):
        result.extend([v] * counts[v])
    return result


def two_sum_pairs(
    values: Iterable[int], target: int
) -> tuple[int, int, int] | None:
    """Find index pairs whose values add up to ``target``.

    Returns ``(first, second, count)`` where ``first`` and ``second`` are the
    indices of the last pair found and ``count`` is the number of pairs, or
    ``None`` when there is no such pair.  Each value's partner is looked up at
    the last index where that value occurs.
    """
    items = list(values)
    last_pos = {v: i for i, v in enumerate(items)}
    hits = 0
    found: tuple[int, int] | None = None
    for i, v in enumerate(items):
        j = last_pos.get(target - v)
        if j is not None and j != i:
            hits += 1
            found = (i, j)
    if found is None:
        return None
    return found[0], found[1], hits // 2


def main(argv: list[str] | None = None) -> int:
    """Run one of the list tasks on integers read from stdin."""
    parser = argparse.ArgumentParser(description="Integer list tasks.")
    sub = parser.add_subparsers(dest="task", required=True)
    sub.add_parser("sort", help="read n and n integers; print them sorted")
    sub.add_parser(
        "pairs", help="read n, target and n integers; find pairs summing to target"
    )
    args = parser.parse_args(argv)
    tokens = iter(int(t) for t in sys.stdin.read().split())
    n = next(tokens)
    if args.task == "sort":
        values = [next(tokens) for _ in range(n)]
        print(" ".join(str(v) for v in counting_sort(values)))
        return 0
    target = next(tokens)
    values = [next(tokens) for _ in range(n)]
    result = two_sum_pairs(values, target)
    if result is None:
        print("NO SUCH PAIRS")
    else:
        first, second, count = result
        print(first, second)
        print(count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())