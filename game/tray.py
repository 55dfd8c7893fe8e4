"""The player's tray: a bounded list of candy keys awaiting a serve."""
from __future__ import annotations

from typing import List, Tuple

from config import TRAY_MAX


class Tray:
    def __init__(self, capacity: int = TRAY_MAX) -> None:
        if capacity < 1:
            raise ValueError("tray capacity must be at least 1")
        self.capacity = capacity
        self._items: List[str] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(self._items)

    @property
    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def add(self, key: str) -> bool:
        """Append ``key``; returns False and leaves the tray untouched when full."""
        if self.is_full:
            return False
        self._items.append(key)
        return True

    def undo(self) -> None:
        if self._items:
            self._items.pop()

    def clear(self) -> None:
        self._items = []
