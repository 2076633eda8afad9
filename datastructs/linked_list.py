"""A singly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional[_Node[T]] = None


class LinkedList(Generic[T]):
    """Singly linked list supporting operations at both ends."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._first: _Node[T] | None = None
        self._last: _Node[T] | None = None
        self._count = 0
        for item in items or ():
            self.add_last(item)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.value
            node = node.next

    def __contains__(self, value: Any) -> bool:
        return self.index_of(value) != -1

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> LinkedList[T]:
        """Return an independent list holding the same values."""
        return LinkedList(self)

    def add_first(self, value: T) -> None:
        node = _Node(value)
        if self._first is None:
            self._first = self._last = node
        else:
            node.next = self._first
            self._first = node
        self._count += 1

    def add_last(self, value: T) -> None:
        node = _Node(value)
        if self._last is None:
            self._first = self._last = node
        else:
            self._last.next = node
            self._last = node
        self._count += 1

    def delete_first(self) -> None:
        """Remove the first value; raise IndexError if the list is empty."""
        if self._first is None:
            raise IndexError("delete from empty list")
        self._first = self._first.next
        if self._first is None:
            self._last = None
        self._count -= 1

    def delete_last(self) -> None:
        """Remove the last value; raise IndexError if the list is empty."""
        if self._first is None:
            raise IndexError("delete from empty list")
        if self._first is self._last:
            self.delete_first()
            return
        node = self._first
        while node.next is not self._last:
            node = node.next
        node.next = None
        self._last = node
        self._count -= 1

    def index_of(self, value: Any) -> int:
        """Return the position of the first occurrence of ``value``, or -1."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return -1

    def is_empty(self) -> bool:
        return self._first is None

    def reverse(self) -> None:
        """Reverse the list in place."""
        if self._first is self._last:
            return
        previous: _Node[T] | None = None
        current = self._first
        self._last = self._first
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._first = previous

    def kth_from_end(self, k: int) -> T:
        """Return the value ``k`` places before the last one (0 is the last)."""
        if self._first is None or self._last is None:
            raise IndexError("empty list")
        if k < 0 or k >= self._count:
            raise IndexError("position outside the list")
        lead = self._first
        for _ in range(k):
            assert lead.next is not None
            lead = lead.next
        trail = self._first
        while lead is not self._last:
            assert lead.next is not None and trail.next is not None
            lead = lead.next
            trail = trail.next
        return trail.value