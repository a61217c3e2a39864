"""A singly linked list and a stack built on it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from dsakit.array_stack import StackEmptyError


@dataclass
class _Node:
    key: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list of keys."""

    def __init__(self) -> None:
        self._head: _Node | None = None

    def _find(self, value: Any) -> _Node:
        node = self._head
        while node is not None:
            if node.key == value:
                return node
            node = node.next
        raise ValueError("The value does not exists")

    def insert_front(self, key: Any) -> None:
        self._head = _Node(key, self._head)

    def insert_back(self, key: Any) -> None:
        new = _Node(key)
        if self._head is None:
            self._head = new
            return
        node = self._head
        while node.next is not None:
            node = node.next
        node.next = new

    def insert_after(self, key: Any, value: Any) -> None:
        """Insert ``key`` after the first node holding ``value``."""
        node = self._find(value)
        node.next = _Node(key, node.next)

    def update(self, key: Any, value: Any) -> None:
        """Replace the first ``value`` in the list with ``key``."""
        self._find(value).key = key

    def remove_head(self) -> Any:
        """Remove and return the first key."""
        if self._head is None:
            raise IndexError("List Empty")
        node = self._head
        self._head = node.next
        return node.key

    def remove(self, key: Any) -> None:
        """Remove the first node holding ``key``."""
        prev: _Node | None = None
        node = self._head
        while node is not None:
            if node.key == key:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                return
            prev, node = node, node.next
        raise ValueError("The value does not exists")

    def remove_end(self) -> Any:
        """Remove and return the last key."""
        if self._head is None:
            raise IndexError("List Empty")
        prev: _Node | None = None
        node = self._head
        while node.next is not None:
            prev, node = node, node.next
        if prev is None:
            self._head = None
        else:
            prev.next = None
        return node.key

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.key
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{key} -> " for key in self) + "End"


class ListStack:
    """Unbounded stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._list = LinkedList()

    def is_empty(self) -> bool:
        return self._list._head is None

    def is_full(self) -> bool:
        return False

    def push(self, x: Any) -> None:
        self._list.insert_front(x)

    def pop(self) -> None:
        """Discard the top item."""
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        self._list.remove_head()

    def clear(self) -> None:
        self._list = LinkedList()

    def top(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        return next(iter(self._list))

    def top_and_pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        return self._list.remove_head()

    def __len__(self) -> int:
        return len(self._list)

    def __str__(self) -> str:
        return str(self._list)