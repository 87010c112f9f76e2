"""A weight wrapper with reversed ordering, and weight factorisation."""

from __future__ import annotations

import operator
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Callable, Generic, TypeVar

W = TypeVar("W")


def _lift(op: Callable[[Any, Any], Any]) -> Callable[[Reverse, Any], Any]:
    def method(self: Reverse, other: Any) -> Any:
        if not isinstance(other, Reverse):
            return NotImplemented
        return Reverse(op(self.value, other.value))

    method.__name__ = f"__{op.__name__.strip('_')}__"
    return method


@total_ordering
@dataclass(frozen=True)
class Reverse(Generic[W]):
    """Wraps a weight so that comparisons are inverted while arithmetic is kept."""

    value: W

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Reverse):
            return NotImplemented
        return other.value < self.value

    __add__ = _lift(operator.add)
    __sub__ = _lift(operator.sub)
    __mul__ = _lift(operator.mul)
    __truediv__ = _lift(operator.truediv)
    __mod__ = _lift(operator.mod)

    def __bool__(self) -> bool:
        return bool(self.value)

    def __str__(self) -> str:
        return str(self.value)

    def unwrap(self) -> W:
        """Return the wrapped weight."""
        return self.value

    @classmethod
    def parse(cls, text: str, convert: Callable[[str], W]) -> Reverse[W]:
        """Parse ``text`` with ``convert`` and wrap the result."""
        return cls(convert(text))

    def factorize(self, n: int) -> list[Reverse[W]]:
        """Split into ``n`` wrapped factors whose product is this weight."""
        return [Reverse(factor) for factor in factorize(self.value, n)]


def factorize(weight: Any, n: int) -> list[Any]:
    """Split ``weight`` into ``n`` equal factors whose product is ``weight``.

    ``None`` stands for the unit weight and factorises into ``n`` copies of itself.
    """
    if n < 0:
        raise ValueError("the number of factors must not be negative")
    if weight is None:
        return [None] * n
    if isinstance(weight, Reverse):
        return weight.factorize(n)
    if n == 0:
        return []
    factor = weight ** (1.0 / n)
    return [factor] * n