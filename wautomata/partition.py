"""Partitions of an alphabet into disjoint cells."""

from __future__ import annotations

import json
from typing import Any, Iterable, Iterator


class OverlappingCellsError(ValueError):
    """Raised when a symbol is contained in more than one cell."""


class Partition:
    """A partition of an alphabet into pairwise disjoint cells."""

    def __init__(self, cells: Iterable[Iterable[Any]] = ()) -> None:
        mapping: dict[Any, frozenset] = {}
        for cell in cells:
            frozen = frozenset(cell)
            for symbol in frozen:
                if symbol in mapping:
                    raise OverlappingCellsError(
                        f"symbol {symbol!r} occurs in more than one cell"
                    )
                mapping[symbol] = frozen
        self._map = dict(sorted(mapping.items(), key=lambda item: item[0]))

    def get_cell(self, elem: Any) -> frozenset | None:
        """Return the cell containing ``elem``, or None if it is not in the alphabet."""
        return self._map.get(elem)

    def collapse(self) -> list[frozenset]:
        """Return every cell once, ordered by its smallest symbol."""
        cells: list[frozenset] = []
        seen: set = set()
        for symbol, cell in self._map.items():
            if symbol not in seen:
                cells.append(cell)
                seen.update(cell)
        return cells

    def alphabet(self) -> Iterator[Any]:
        """Iterate over all symbols in ascending order."""
        return iter(self._map)

    def to_json(self) -> str:
        """Serialise the partition as a JSON list of sorted cells."""
        return json.dumps([sorted(cell) for cell in self.collapse()])

    @classmethod
    def from_json(cls, text: str) -> Partition:
        """Build a partition from a JSON list of cells."""
        cells = json.loads(text)
        if not isinstance(cells, list) or not all(isinstance(c, list) for c in cells):
            raise ValueError("a partition must be a JSON list of lists")
        return cls(cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return self._map == other._map

    def __repr__(self) -> str:
        return f"Partition({[sorted(cell) for cell in self.collapse()]!r})"