"""A self-balancing AVL binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 1


def _height(node: _Node | None) -> int:
    return node.height if node is not None else 0


def _balance(node: _Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(a: _Node) -> _Node:
    b = a.left
    assert b is not None
    a.left = b.right
    b.right = a
    _update(a)
    _update(b)
    return b


def _rotate_left(a: _Node) -> _Node:
    b = a.right
    assert b is not None
    a.right = b.left
    b.left = a
    _update(a)
    _update(b)
    return b


def _rebalance(node: _Node) -> _Node:
    _update(node)
    factor = _balance(node)
    if factor > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if factor < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _insert(node: _Node | None, val: Any) -> _Node:
    if node is None:
        return _Node(val)
    if val < node.data:
        node.left = _insert(node.left, val)
    else:
        node.right = _insert(node.right, val)
    return _rebalance(node)


def _pop_max(node: _Node) -> tuple[_Node | None, Any]:
    if node.right is None:
        return node.left, node.data
    node.right, value = _pop_max(node.right)
    return _rebalance(node), value


def _delete(node: _Node | None, val: Any) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if val < node.data:
        node.left, removed = _delete(node.left, val)
    elif val > node.data:
        node.right, removed = _delete(node.right, val)
    elif node.left is not None and node.right is not None:
        node.left, node.data = _pop_max(node.left)
        removed = True
    else:
        return node.left if node.left is not None else node.right, True
    return _rebalance(node), removed


class AVLTree:
    """Ordered multiset kept height-balanced; equal values go to the right."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, val: Any) -> None:
        self._root = _insert(self._root, val)
        self._size += 1

    def search(self, val: Any) -> bool:
        """Return whether ``val`` is stored in the tree."""
        node = self._root
        while node is not None:
            if node.data == val:
                return True
            node = node.left if node.data > val else node.right
        return False

    def delete(self, val: Any) -> None:
        """Remove one occurrence of ``val``; absent values are ignored."""
        self._root, removed = _delete(self._root, val)
        if removed:
            self._size -= 1

    def __contains__(self, val: object) -> bool:
        return self.search(val)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def preorder(self) -> Iterator[Any]:
        """Yield values root first, then the left and right subtrees."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.data
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def height(self) -> int:
        """Return the number of levels; an empty tree has height 0."""
        return _height(self._root)