"""Bijective mapping between hashable values and consecutive integers."""

from __future__ import annotations

from typing import Generic, Hashable, Iterable, Iterator, TypeVar

T = TypeVar("T", bound=Hashable)


class HashIntegeriser(Generic[T]):
    """Assigns each distinct value a stable integer id, starting from zero."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._ids: dict[T, int] = {}
        self._values: list[T] = []
        for value in values:
            self.integerise(value)

    def integerise(self, value: T) -> int:
        """Return the id of ``value``, assigning a fresh one if it is new."""
        key = self._ids.get(value)
        if key is None:
            key = len(self._values)
            self._ids[value] = key
            self._values.append(value)
        return key

    def find_key(self, value: T) -> int:
        """Return the id of a known value; raise KeyError otherwise."""
        try:
            return self._ids[value]
        except KeyError:
            raise KeyError(value) from None

    def find_value(self, key: int) -> T:
        """Return the value with id ``key``; raise KeyError otherwise."""
        if isinstance(key, int) and 0 <= key < len(self._values):
            return self._values[key]
        raise KeyError(key)

    def __contains__(self, value: object) -> bool:
        return value in self._ids

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"HashIntegeriser({self._values!r})"