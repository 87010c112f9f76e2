"""A max-priority queue that holds every item at most once."""

from __future__ import annotations

import heapq
from typing import Any, Iterable, Iterator


class _Entry:
    __slots__ = ("weight", "item")

    def __init__(self, weight: Any, item: Any) -> None:
        self.weight = weight
        self.item = item

    def __lt__(self, other: _Entry) -> bool:
        return (other.weight, other.item) < (self.weight, self.item)


class UniqueHeap:
    """Max-heap ordered by weight first and item second; items are unique.

    An item that has been popped may be pushed again.
    """

    def __init__(self) -> None:
        self._heap: list[_Entry] = []
        self._items: set = set()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[Any, Any]]) -> UniqueHeap:
        """Build a heap from ``(item, weight)`` pairs; the first weight of an item wins."""
        heap = cls()
        for item, weight in pairs:
            heap.push(item, weight)
        return heap

    def push(self, item: Any, weight: Any) -> bool:
        """Push ``item`` unless it is present; return whether it was pushed."""
        if item in self._items:
            return False
        self._items.add(item)
        heapq.heappush(self._heap, _Entry(weight, item))
        return True

    def pop(self) -> tuple[Any, Any]:
        """Remove and return the greatest ``(item, weight)``; raise IndexError if empty."""
        if not self._heap:
            raise IndexError("pop from an empty heap")
        entry = heapq.heappop(self._heap)
        self._items.discard(entry.item)
        return entry.item, entry.weight

    def peek(self) -> tuple[Any, Any]:
        """Return the greatest ``(weight, item)`` without removing it."""
        if not self._heap:
            raise IndexError("peek into an empty heap")
        entry = self._heap[0]
        return entry.weight, entry.item

    def is_empty(self) -> bool:
        return not self._heap

    def into_sorted_list(self) -> list[tuple[Any, Any]]:
        """Empty the heap and return its ``(weight, item)`` pairs in ascending order."""
        result = sorted((entry.weight, entry.item) for entry in self._heap)
        self._heap.clear()
        self._items.clear()
        return result

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """Iterate over the ``(weight, item)`` pairs in no particular order."""
        return ((entry.weight, entry.item) for entry in list(self._heap))

    def __repr__(self) -> str:
        return f"UniqueHeap({sorted(self)!r})"