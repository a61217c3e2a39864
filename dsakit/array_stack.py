"""A bounded stack with a fixed capacity."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class StackEmptyError(IndexError):
    """Raised when reading or removing from an empty stack."""


class StackFullError(OverflowError):
    """Raised when pushing onto a full stack."""


class ArrayStack:
    """Last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def push(self, x: Any) -> None:
        if self.is_full():
            raise StackFullError("Stack is Full")
        self._items.append(x)

    def pop(self) -> None:
        """Discard the top item."""
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        self._items.pop()

    def clear(self) -> None:
        self._items.clear()

    def top(self) -> Any:
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        return self._items[-1]

    def top_and_pop(self) -> Any:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackEmptyError("Stack is Empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __str__(self) -> str:
        if self.is_empty():
            return "Stack is Empty"
        return " ".join(str(x) for x in self)