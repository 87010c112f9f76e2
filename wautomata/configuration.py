"""Configurations of weighted automata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable


def _order(left: Any, right: Any) -> int:
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


@dataclass(frozen=True, eq=False)
class Configuration:
    """The word still to be read, a storage value and the weight so far.

    Equality and hashing ignore the weight; ordering compares the weight
    first, then prefers shorter remaining words, then the word and storage.
    """

    word: tuple
    storage: Any
    weight: Any

    def __init__(self, word: Iterable[Any], storage: Any, weight: Any) -> None:
        object.__setattr__(self, "word", tuple(word))
        object.__setattr__(self, "storage", storage)
        object.__setattr__(self, "weight", weight)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self.word == other.word and self.storage == other.storage

    def __hash__(self) -> int:
        return hash((self.word, self.storage))

    def _cmp(self, other: Configuration) -> int:
        return (
            _order(self.weight, other.weight)
            or _order(len(other.word), len(self.word))
            or _order(self.word, other.word)
            or _order(self.storage, other.storage)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._cmp(other) >= 0

    def __str__(self) -> str:
        word = " ".join(str(symbol) for symbol in self.word)
        return f"Configuration:\nword:[{word}]\nweight:{self.weight}\n{self.storage}\n"