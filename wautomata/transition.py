"""Weighted transitions of automata."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterable

from wautomata.configuration import Configuration
from wautomata.integeriser import HashIntegeriser


def _order(left: Any, right: Any) -> int:
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def _debug(symbol: Any) -> str:
    if isinstance(symbol, str):
        return json.dumps(symbol, ensure_ascii=False)
    return str(symbol)


@dataclass(frozen=True, eq=False)
class Transition:
    """Reads ``word``, applies ``instruction`` to the storage and multiplies by ``weight``.

    Equality and hashing ignore the weight; ordering compares the weight,
    then the word, then the instruction.
    """

    word: tuple
    weight: Any
    instruction: Any

    def __init__(self, word: Iterable[Any], weight: Any, instruction: Any) -> None:
        object.__setattr__(self, "word", tuple(word))
        object.__setattr__(self, "weight", weight)
        object.__setattr__(self, "instruction", instruction)

    def apply(self, configuration: Configuration) -> list[Configuration]:
        """Return every configuration reachable from ``configuration`` by this transition."""
        size = len(self.word)
        if configuration.word[:size] != self.word:
            return []
        rest = configuration.word[size:]
        weight = configuration.weight * self.weight
        return [
            Configuration(rest, storage, weight)
            for storage in self.instruction.apply(configuration.storage)
        ]

    def integerise(
        self,
        terminal_integeriser: HashIntegeriser,
        instruction_integeriser: HashIntegeriser,
    ) -> Transition:
        """Replace terminals and the instruction by their integer representation."""
        instruction = self.instruction
        if hasattr(instruction, "integerise"):
            instruction_int = instruction.integerise(instruction_integeriser)
        else:
            instruction_int = instruction_integeriser.integerise(instruction)
        return Transition(
            (terminal_integeriser.integerise(t) for t in self.word),
            self.weight,
            instruction_int,
        )

    @classmethod
    def un_integerise(
        cls,
        transition: Transition,
        terminal_integeriser: HashIntegeriser,
        instruction_integeriser: HashIntegeriser,
    ) -> Transition:
        """Restore a transition produced by :meth:`integerise`."""
        instruction_int = transition.instruction
        restore = getattr(type(instruction_int), "un_integerise", None)
        if restore is not None:
            instruction = restore(instruction_int, instruction_integeriser)
        else:
            instruction = instruction_integeriser.find_value(instruction_int)
        return cls(
            (terminal_integeriser.find_value(i) for i in transition.word),
            transition.weight,
            instruction,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self.word == other.word and self.instruction == other.instruction

    def __hash__(self) -> int:
        return hash((self.word, self.instruction))

    def _cmp(self, other: Transition) -> int:
        return (
            _order(self.weight, other.weight)
            or _order(self.word, other.word)
            or _order(self.instruction, other.instruction)
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self._cmp(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self._cmp(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self._cmp(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return self._cmp(other) >= 0

    def __str__(self) -> str:
        word = "[" + ", ".join(_debug(symbol) for symbol in self.word) + "]"
        return f"Transition {word} {self.instruction}  # {self.weight}"