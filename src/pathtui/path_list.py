from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Direction(Enum):
    UP = "up"
    DOWN = "down"


class Side(Enum):
    BEFORE = "before"
    AFTER = "after"


class PathList:
    """Ordered search-path entries plus the selection cursor.

    The selection is ``None`` exactly when the list is empty; every mutating
    method leaves it pointing at a valid index otherwise.
    """

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries = list(entries)
        self._selection: int | None = 0 if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    @property
    def selection(self) -> int | None:
        return self._selection

    @property
    def selected_entry(self) -> str | None:
        if self._selection is None:
            return None
        return self._entries[self._selection]

    def select(self, index: int | None) -> None:
        if not self._entries:
            self._selection = None
            return
        if index is None:
            index = 0
        self._selection = max(0, min(index, len(self._entries) - 1))

    def move_selection(self, direction: Direction) -> None:
        if self._selection is None:
            return
        delta = -1 if direction == Direction.UP else 1
        self.select(self._selection + delta)

    def delete_selected(self) -> str | None:
        if self._selection is None:
            return None
        removed = self._entries.pop(self._selection)
        if not self._entries:
            self._selection = None
        elif self._selection >= len(self._entries):
            self._selection = len(self._entries) - 1
        return removed

    def insert(self, path: str, side: Side) -> int:
        base = self._selection if self._selection is not None else 0
        index = base if side == Side.BEFORE else base + 1
        index = max(0, min(index, len(self._entries)))
        self._entries.insert(index, path)
        self._selection = index
        return index
