"""A growable array of integers with explicit capacity management."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO


class DynamicArray:
    """Array that doubles its capacity when full and halves it when sparse."""

    def __init__(self, capacity: int = 1) -> None:
        self._items: list[int] = []
        self._capacity = capacity if capacity > 0 else 1

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __getitem__(self, index: int) -> int:
        self._check_index(index, len(self._items) - 1)
        return self._items[index]

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"

    @property
    def capacity(self) -> int:
        """Number of slots currently reserved."""
        return self._capacity

    @staticmethod
    def _check_index(index: int, upper: int) -> None:
        if index < 0 or index > upper:
            raise IndexError("index out of range")

    def insert(self, value: int) -> None:
        """Append a value, doubling the capacity if the array is full."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def remove_at(self, index: int) -> None:
        """Remove the value at ``index``, halving capacity when it is over half empty."""
        self._check_index(index, len(self._items) - 1)
        del self._items[index]
        if self._capacity // 2 > len(self._items):
            self._capacity //= 2

    def index_of(self, value: int) -> int:
        """Return the position of the first occurrence of ``value``, or -1."""
        for position, item in enumerate(self._items):
            if item == value:
                return position
        return -1

    def print(self, file: TextIO | None = None) -> None:
        """Write each value on its own line."""
        out = sys.stdout if file is None else file
        for item in self._items:
            print(item, file=out)

    def max(self) -> int:
        """Return the largest value."""
        if not self._items:
            raise ValueError("max() of an empty array")
        return max(self._items)

    def intersect(self, other: DynamicArray) -> DynamicArray:
        """Return a new array of the values of this one that also occur in ``other``."""
        common = DynamicArray(0)
        for item in self._items:
            if other.index_of(item) != -1:
                common.insert(item)
        return common

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._items.reverse()

    def insert_at(self, value: int, index: int) -> None:
        """Insert ``value`` before position ``index`` (``index`` may equal the length)."""
        self._check_index(index, len(self._items))
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.insert(index, value)