"""A prefix tree over lowercase Latin words."""

from __future__ import annotations

import argparse
import string
import sys
from dataclasses import dataclass, field


@dataclass
class _Node:
    is_end: bool = False
    edges: dict[str, _Node] = field(default_factory=dict)


def _check(word: str) -> None:
    bad = set(word) - set(string.ascii_lowercase)
    if bad:
        raise ValueError(f"word may hold only letters a-z: {word!r}")


class Trie:
    """Set of words stored as a prefix tree."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        _check(word)
        node = self._root
        for ch in word:
            node = node.edges.setdefault(ch, _Node())
        node.is_end = True

    def _walk(self, word: str) -> _Node | None:
        _check(word)
        node: _Node | None = self._root
        for ch in word:
            node = node.edges.get(ch)
            if node is None:
                return None
        return node

    def search(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_end

    def remove(self, word: str) -> None:
        """Unmark ``word``; absent words are ignored."""
        node = self._walk(word)
        if node is not None:
            node.is_end = False

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def main(argv: list[str] | None = None) -> int:
    """Read words, then queries, from stdin and report which are found."""
    argparse.ArgumentParser(
        description="Answer word lookups against a word list read from stdin."
    ).parse_args(argv)
    tokens = iter(sys.stdin.read().split())
    trie = Trie()
    print("ENTER NUMBER OF WORDS")
    for _ in range(int(next(tokens))):
        trie.insert(next(tokens))
    print("ENTER NUMBER OF QUERY")
    for _ in range(int(next(tokens))):
        print("FOUND" if trie.search(next(tokens)) else "NOT FOUND")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())