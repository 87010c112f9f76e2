"""Instructions, items, automata and best-first recognition of words."""

from __future__ import annotations

import bisect
import heapq
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from functools import total_ordering
from typing import Any, Hashable, Iterable, Iterator

from wautomata.configuration import Configuration
from wautomata.pushdown import Pushdown
from wautomata.transition import Transition


class Instruction(ABC):
    """Something that maps a storage value to any number of successor storages."""

    @abstractmethod
    def apply(self, storage: Any) -> list[Any]:
        """Return every storage reachable from ``storage``."""


@total_ordering
@dataclass(frozen=True)
class Item:
    """A configuration together with the run of transitions that led to it."""

    configuration: Configuration
    run: Pushdown = field(default_factory=Pushdown)

    def weight(self) -> Any:
        """Return the weight of the configuration."""
        return self.configuration.weight

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        if self.configuration < other.configuration:
            return True
        if other.configuration < self.configuration:
            return False
        return self.run < other.run


class Automaton(ABC):
    """Transitions, an initial storage and a predicate for terminal configurations.

    Subclasses define how configurations and transitions are keyed, so that
    only transitions that may apply are tried, and which configurations accept.
    """

    def __init__(self, transitions: Iterable[Transition], initial: Any, one: Any = 1) -> None:
        self._transitions = tuple(transitions)
        self._initial = initial
        self.one = one
        self._map: dict[Hashable, tuple[Transition, ...]] | None = None

    def transitions(self) -> Iterator[Transition]:
        """Iterate over the transitions."""
        return iter(self._transitions)

    def initial(self) -> Any:
        """Return the initial storage."""
        return self._initial

    @abstractmethod
    def extract_key(self, configuration: Configuration) -> Hashable:
        """Return the key selecting the transitions that may apply to ``configuration``."""

    @abstractmethod
    def is_terminal(self, configuration: Configuration) -> bool:
        """Return whether the automaton may stop and accept in ``configuration``."""

    @abstractmethod
    def _transition_key(self, transition: Transition) -> Hashable:
        """Return the key under which ``transition`` is filed."""

    def transition_map(self) -> dict[Hashable, tuple[Transition, ...]]:
        """Return the transitions grouped by key, greatest first within each group."""
        if self._map is None:
            groups: dict[Hashable, list[Transition]] = {}
            for transition in self._transitions:
                groups.setdefault(self._transition_key(transition), []).append(transition)
            self._map = {
                key: tuple(sorted(group, reverse=True)) for key, group in groups.items()
            }
        return self._map

    def check_run(self, run: Pushdown) -> list[Item]:
        """Replay ``run`` from the initial storage and return the resulting items."""
        storages = [self.initial()]
        weight = self.one
        for transition in run:
            weight = weight * transition.weight
            storages = [
                successor
                for storage in storages
                for successor in transition.instruction.apply(storage)
            ]
        return [Item(Configuration((), storage, weight), run) for storage in storages]


class _Greatest:
    __slots__ = ("item",)

    def __init__(self, item: Item) -> None:
        self.item = item

    def __lt__(self, other: _Greatest) -> bool:
        return other.item < self.item


class _BestFirstAgenda:
    def __init__(self) -> None:
        self._heap: list[_Greatest] = []

    def push(self, item: Item) -> None:
        heapq.heappush(self._heap, _Greatest(item))

    def pop(self) -> Item:
        return heapq.heappop(self._heap).item

    def __bool__(self) -> bool:
        return bool(self._heap)


class _BeamAgenda:
    """Keeps at most ``capacity`` items, dropping the lightest on overflow."""

    def __init__(self, capacity: int) -> None:
        self._capacity = capacity
        self._items: list[Item] = []

    def push(self, item: Item) -> None:
        bisect.insort(self._items, item, key=Item.weight)
        if len(self._items) > self._capacity:
            del self._items[0]

    def pop(self) -> Item:
        return self._items.pop()

    def __bool__(self) -> bool:
        return bool(self._items)


def _search(automaton: Automaton, agenda: Any, word: Iterable[Any]) -> Iterator[Item]:
    agenda.push(Item(Configuration(word, automaton.initial(), automaton.one), Pushdown()))
    transition_map = automaton.transition_map()
    while agenda:
        item = agenda.pop()
        key = automaton.extract_key(item.configuration)
        for transition in transition_map.get(key, ()):
            for successor in transition.apply(item.configuration):
                agenda.push(Item(successor, item.run.push(transition)))
        if automaton.is_terminal(item.configuration):
            yield item


def recognise(automaton: Automaton, word: Iterable[Any]) -> Iterator[Item]:
    """Yield the accepting items for ``word``, heaviest first."""
    return _search(automaton, _BestFirstAgenda(), tuple(word))


def recognise_beam(automaton: Automaton, beam: int, word: Iterable[Any]) -> Iterator[Item]:
    """Like :func:`recognise`, but keep at most ``beam`` items on the agenda."""
    if beam < 0:
        raise ValueError("the beam width must not be negative")
    return _search(automaton, _BeamAgenda(beam), tuple(word))