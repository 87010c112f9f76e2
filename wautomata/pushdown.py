"""A persistent, structurally shared push-down store."""

from __future__ import annotations

from functools import total_ordering
from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from wautomata.integeriser import HashIntegeriser

A = TypeVar("A")
B = TypeVar("B")


class EmptyPushdownError(IndexError):
    """Raised when the top of an empty push-down is accessed."""


@total_ordering
class Pushdown(Generic[A]):
    """An immutable stack; every operation returns a new push-down sharing its tail."""

    __slots__ = ("_value", "_below", "_size")

    def __init__(self) -> None:
        self._value: Any = None
        self._below: Pushdown[A] | None = None
        self._size = 0

    @classmethod
    def _cons(cls, value: A, below: Pushdown[A]) -> Pushdown[A]:
        node = cls.__new__(cls)
        node._value = value
        node._below = below
        node._size = below._size + 1
        return node

    @classmethod
    def from_iterable(cls, items: Iterable[A]) -> Pushdown[A]:
        """Build a push-down whose bottom is the first item."""
        result: Pushdown[A] = cls()
        for item in items:
            result = result.push(item)
        return result

    def _walk(self) -> Iterator[A]:
        node = self
        while node._below is not None:
            yield node._value
            node = node._below

    def push(self, value: A) -> Pushdown[A]:
        """Return a push-down with ``value`` on top."""
        return self._cons(value, self)

    def set(self, value: A) -> Pushdown[A]:
        """Return a push-down whose top symbol is replaced by ``value``."""
        if self._below is None:
            raise EmptyPushdownError("cannot set the top of an empty pushdown")
        return self._cons(value, self._below)

    def pop(self) -> tuple[Pushdown[A], A]:
        """Return the push-down below the top together with the top symbol."""
        if self._below is None:
            raise EmptyPushdownError("cannot pop from an empty pushdown")
        return self._below, self._value

    def peek(self) -> A:
        """Return the top symbol."""
        if self._below is None:
            raise EmptyPushdownError("cannot peek into an empty pushdown")
        return self._value

    def is_empty(self) -> bool:
        return self._below is None

    def map(self, func: Callable[[A], B]) -> Pushdown[B]:
        """Apply ``func`` to every symbol, from the top downwards."""
        mapped = [func(value) for value in self._walk()]
        mapped.reverse()
        return Pushdown.from_iterable(mapped)

    def to_list(self) -> list[A]:
        """Return the symbols from bottom to top."""
        values = list(self._walk())
        values.reverse()
        return values

    def __iter__(self) -> Iterator[A]:
        return iter(self.to_list())

    def __len__(self) -> int:
        return self._size

    def integerise(self, integeriser: HashIntegeriser) -> Pushdown[int]:
        """Replace every symbol by its id in ``integeriser``."""
        return self.map(integeriser.integerise)

    @classmethod
    def un_integerise(
        cls, pushdown: Pushdown[int], integeriser: HashIntegeriser
    ) -> Pushdown[Any]:
        """Replace every id by the symbol it stands for in ``integeriser``."""
        return pushdown.map(integeriser.find_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pushdown):
            return NotImplemented
        left: Pushdown = self
        right: Pushdown = other
        if left._size != right._size:
            return False
        while left is not right and left._below is not None:
            if left._value != right._value:
                return False
            left, right = left._below, right._below  # type: ignore[assignment]
        return True

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Pushdown):
            return NotImplemented
        return tuple(self._walk()) < tuple(other._walk())

    def __hash__(self) -> int:
        return hash(tuple(self._walk()))

    def __str__(self) -> str:
        return ", ".join(["@", *(str(v) for v in self.to_list())])

    def __repr__(self) -> str:
        return f"Pushdown.from_iterable({self.to_list()!r})"