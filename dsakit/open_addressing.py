"""A fixed-size hash table of integer keys using open addressing with linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

__all__ = ["TableFullError", "LinearProbingTable"]


class TableFullError(OverflowError):
    """Raised when inserting into a table with no free slot."""


class LinearProbingTable:
    """Keys hash to ``key % size``; collisions probe the following slots in turn.

    Removal simply frees the slot, so keys placed further along the same
    probe run may no longer be found afterwards.
    """

    def __init__(self, size: int = 10) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._slots: list[Optional[int]] = [None] * size

    def _probe(self, key: int) -> Iterator[int]:
        start = key % self.size
        for step in range(self.size):
            yield (start + step) % self.size

    def insert(self, key: int) -> None:
        """Store a key in the first free slot of its probe run."""
        for index in self._probe(key):
            if self._slots[index] is None:
                self._slots[index] = key
                return
        raise TableFullError("hash table is full")

    def remove(self, key: int) -> None:
        """Free the slot holding ``key``; raise KeyError if it is not found."""
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                break
            if slot == key:
                self._slots[index] = None
                return
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        for index in self._probe(key):
            slot = self._slots[index]
            if slot is None:
                return False
            if slot == key:
                return True
        return False

    def slots(self) -> list[Optional[int]]:
        """Return a copy of the slots, ``None`` marking an empty one."""
        return list(self._slots)

    def __repr__(self) -> str:
        return f"LinearProbingTable({self._slots!r})"