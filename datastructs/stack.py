"""A stack with a capacity that grows and shrinks."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

_INITIAL_CAPACITY = 5


class Stack(Generic[T]):
    """Stack starting with room for five items, doubling when full."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._capacity = _INITIAL_CAPACITY

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Stack({self._items!r}, capacity={self._capacity})"

    def is_empty(self) -> bool:
        return not self._items

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def pop(self) -> T:
        """Remove and return the top item, halving capacity when under a third full."""
        if not self._items:
            raise IndexError("stack is empty")
        top = self._items.pop()
        if len(self._items) < self._capacity // 3 and self._capacity > _INITIAL_CAPACITY:
            self._capacity //= 2
        return top

    def push(self, value: T) -> None:
        """Push an item, doubling the capacity if the stack is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)