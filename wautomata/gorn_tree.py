"""Tree maps whose nodes are addressed by Gorn addresses."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any

Address = tuple[int, ...]


def _address(key: Iterable[int]) -> Address:
    return tuple(key)


class GornTree(MutableMapping):
    """A mapping from Gorn addresses to values, iterated in address order.

    A Gorn address is the sequence of child positions that leads from the
    root to a node; the root has the empty address ``()``. Keys may be given
    as any sequence of integers and are stored as tuples.
    """

    def __init__(self, items: Mapping | Iterable[tuple[Iterable[int], Any]] = ()) -> None:
        self._map: dict[Address, Any] = {}
        pairs = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self[key] = value

    def __getitem__(self, key: Iterable[int]) -> Any:
        return self._map[_address(key)]

    def __setitem__(self, key: Iterable[int], value: Any) -> None:
        self._map[_address(key)] = value

    def __delitem__(self, key: Iterable[int]) -> None:
        del self._map[_address(key)]

    def __iter__(self) -> Iterator[Address]:
        return iter(sorted(self._map))

    def __len__(self) -> int:
        return len(self._map)

    def split_off(self, key: Iterable[int]) -> GornTree:
        """Move every entry whose address is at least ``key`` into a new tree."""
        bound = _address(key)
        moved = {k: v for k, v in self._map.items() if k >= bound}
        for k in moved:
            del self._map[k]
        return GornTree(moved)

    def append(self, other: GornTree) -> None:
        """Move all entries of ``other`` into this tree, overwriting on conflict."""
        self._map.update(other._map)
        other._map.clear()

    def __repr__(self) -> str:
        return f"GornTree({dict(self.items())!r})"