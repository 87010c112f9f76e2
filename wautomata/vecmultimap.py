"""A list of lists indexed by integers that grows on demand."""

from __future__ import annotations

from typing import Any, Iterator


class VecMultiMap:
    """Maps non-negative integers to lists, padding with empty lists as needed.

    When built from an existing list of lists, that list is used in place.
    """

    def __init__(self, lists: list[list[Any]] | None = None) -> None:
        self._lists: list[list[Any]] = lists if lists is not None else []

    def _pad_to(self, index: int) -> None:
        if index < 0:
            raise IndexError("index must not be negative")
        missing = index + 1 - len(self._lists)
        if missing > 0:
            self._lists.extend([] for _ in range(missing))

    def push_to(self, index: int, value: Any) -> None:
        """Append ``value`` to the list at ``index``."""
        self._pad_to(index)
        self._lists[index].append(value)

    def get(self, index: int) -> list[Any]:
        """Return the list at ``index``, creating empty lists up to it."""
        self._pad_to(index)
        return self._lists[index]

    def get_or_fail(self, index: int) -> list[Any]:
        """Return the list at ``index``; raise IndexError if it does not exist."""
        if not 0 <= index < len(self._lists):
            raise IndexError("index out of bounds")
        return self._lists[index]

    def into_list_with_size(self, size: int) -> list[list[Any]]:
        """Pad or truncate to exactly ``size`` lists and return them."""
        if size < 0:
            raise ValueError("size must not be negative")
        if size < len(self._lists):
            del self._lists[size:]
        else:
            self._lists.extend([] for _ in range(size - len(self._lists)))
        return self._lists

    def into_list(self) -> list[list[Any]]:
        """Return the lists up to and including the last non-empty one."""
        last = max((i for i, values in enumerate(self._lists) if values), default=-1)
        return self.into_list_with_size(last + 1)

    def __getitem__(self, index: int) -> list[Any]:
        return self.get_or_fail(index)

    def __len__(self) -> int:
        return len(self._lists)

    def __iter__(self) -> Iterator[list[Any]]:
        return iter(self._lists)

    def __repr__(self) -> str:
        return f"VecMultiMap({self._lists!r})"