"""Recognition through a chain of successively coarser approximations."""

from __future__ import annotations

import heapq
from typing import Any, Iterable, Iterator

from wautomata.recognition import Automaton, Item, recognise as recognise_with


class _Greatest:
    __slots__ = ("item",)

    def __init__(self, item: Item) -> None:
        self.item = item

    def __lt__(self, other: _Greatest) -> bool:
        return other.item < self.item


_UNSET = object()
_END = object()


def _parses(sublevel: Any, word: tuple) -> Iterator[Item]:
    if isinstance(sublevel, Automaton):
        return recognise_with(sublevel, word)
    return iter(sublevel.recognise(word))


class CoarseToFineRecogniser:
    """Recognises with a coarse sublevel and replays its runs on the fine automaton.

    ``approximation_instance.unapproximate_run`` maps a coarse run to the fine
    runs it stands for; each is checked with the fine automaton's ``check_run``.
    """

    def __init__(self, recogniser: Automaton, sublevel: Any, approximation_instance: Any) -> None:
        self.recogniser = recogniser
        self.sublevel = sublevel
        self.approximation_instance = approximation_instance

    def recognise(self, word: Iterable[Any]) -> Iterator[Item]:
        """Yield fine items, heaviest first as far as the coarse parses allow."""
        return self._forest(_parses(self.sublevel, tuple(word)))

    def _forest(self, parses: Iterator[Item]) -> Iterator[Item]:
        output: list[_Greatest] = []
        head: Any = _UNSET
        while True:
            while True:
                if output:
                    if head is _UNSET:
                        head = next(parses, _END)
                    if head is _END or not output[0].item.weight() < head.weight():
                        break
                if head is _UNSET:
                    head = next(parses, _END)
                if head is _END:
                    return
                coarse, head = head, _UNSET
                for run in self.approximation_instance.unapproximate_run(coarse.run):
                    for item in self.recogniser.check_run(run):
                        heapq.heappush(output, _Greatest(item))
            yield heapq.heappop(output).item


def coarse_to_fine_recogniser(automaton: Automaton, *args: Any) -> CoarseToFineRecogniser:
    """Chain approximation strategies, coarsest last, on top of ``automaton``.

    Each strategy's ``approximate_automaton`` returns the coarser automaton
    and the instance that maps its runs back.
    """
    if not args:
        raise TypeError("at least one approximation strategy is required")
    strategy, *rest = args
    coarse, instance = strategy.approximate_automaton(automaton)
    sublevel = coarse_to_fine_recogniser(coarse, *rest) if rest else coarse
    return CoarseToFineRecogniser(automaton, sublevel, instance)