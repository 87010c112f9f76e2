"""Weighted parallel multiple context-free grammars (PMCFGs)."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Callable, Iterable, Iterator


@total_ordering
class _Symbol:
    """Common ordering for variables and terminals: variables sort first."""

    def _sort_key(self) -> tuple:
        raise NotImplementedError

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Symbol):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True)
class Var(_Symbol):
    """The ``component``-th component of the ``successor``-th successor, counted from 0."""

    successor: int
    component: int

    def _sort_key(self) -> tuple:
        return (0, self.successor, self.component)

    def __str__(self) -> str:
        return f"Var {self.successor} {self.component}"


@dataclass(frozen=True)
class Terminal(_Symbol):
    """A terminal symbol inside a composition function."""

    symbol: Any

    def _sort_key(self) -> tuple:
        return (1, self.symbol)

    def __str__(self) -> str:
        return f'T "{self.symbol}"'


@dataclass(frozen=True, order=True)
class Composition:
    """A composition function: one sequence of variables and terminals per component."""

    components: tuple

    def __init__(self, components: Iterable[Iterable[Var | Terminal]] = ()) -> None:
        object.__setattr__(
            self, "components", tuple(tuple(component) for component in components)
        )

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[tuple]:
        return iter(self.components)

    def __getitem__(self, index: int) -> tuple:
        return self.components[index]

    def __str__(self) -> str:
        inner = ", ".join(
            "[" + ", ".join(str(symbol) for symbol in component) + "]"
            for component in self.components
        )
        return f"[{inner}]"


@dataclass(frozen=True, eq=False)
class PMCFGRule:
    """A weighted rule ``head → composition (tail)``.

    Equality and hashing ignore the weight.
    """

    head: Any
    tail: tuple
    composition: Composition
    weight: Any

    def __init__(
        self,
        head: Any,
        tail: Iterable[Any],
        composition: Composition | Iterable[Iterable[Var | Terminal]],
        weight: Any = 1,
    ) -> None:
        if not isinstance(composition, Composition):
            composition = Composition(composition)
        object.__setattr__(self, "head", head)
        object.__setattr__(self, "tail", tuple(tail))
        object.__setattr__(self, "composition", composition)
        object.__setattr__(self, "weight", weight)

    def map_nonterminals(self, func: Callable[[Any], Any]) -> PMCFGRule:
        """Return a rule with ``func`` applied to the head and every successor."""
        return PMCFGRule(
            func(self.head),
            (func(nonterminal) for nonterminal in self.tail),
            self.composition,
            self.weight,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PMCFGRule):
            return NotImplemented
        return (
            self.head == other.head
            and self.tail == other.tail
            and self.composition == other.composition
        )

    def __hash__(self) -> int:
        return hash((self.head, self.tail, self.composition))

    def __str__(self) -> str:
        tail = "(" + ", ".join(f'"{nonterminal}"' for nonterminal in self.tail) + ")"
        return f'"{self.head}" → {self.composition} {tail}  # {self.weight}'


@dataclass
class PMCFG:
    """A weighted PMCFG: initial nonterminals and a list of rules."""

    initial: list = field(default_factory=list)
    rules: list = field(default_factory=list)

    def __str__(self) -> str:
        initial = ", ".join(f'"{nonterminal}"' for nonterminal in self.initial)
        lines = [f"initial: [{initial}]", ""]
        lines.extend(str(rule) for rule in self.rules)
        return "\n".join(lines) + "\n"