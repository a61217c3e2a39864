"""A FIFO queue built on singly linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class _Node:
    data: Any
    next: _Node | None = None


class LinkedQueue:
    """First-in, first-out queue."""

    def __init__(self) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def push(self, val: Any) -> None:
        """Add ``val`` at the back."""
        node = _Node(val)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the front value."""
        if self._front is None:
            raise IndexError("Queue is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        self._size -= 1
        return node.data

    def front(self) -> Any:
        """Return the front value without removing it."""
        if self._front is None:
            raise IndexError("Queue is empty")
        return self._front.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next