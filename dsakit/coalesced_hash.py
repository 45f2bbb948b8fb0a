"""Hash tables of integers using coalesced chaining inside one fixed array."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from dsakit.open_addressing import TableFullError

__all__ = ["CoalescedHashTable", "CellarHashTable"]


@dataclass(slots=True)
class _Slot:
    value: Optional[int] = None
    next: Optional[int] = None


class CoalescedHashTable:
    """Values hash to ``value % size``; collisions go to the highest free slot.

    The free-slot pointer only moves downwards, so slots above it that are
    freed by removal are not reused for collisions. Chains of different
    buckets may merge. Equal values may be stored more than once.
    """

    def __init__(self, size: int = 7) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._slots = [_Slot() for _ in range(size)]
        self._free = size - 1

    def insert(self, value: int) -> int:
        """Store a value and return the index it was placed at.

        Raises TableFullError once the free-slot pointer has run out.
        """
        if self._free < 0:
            raise TableFullError("hash table is full")
        slots = self._slots
        home = value % self.size
        if slots[home].value is None:
            slots[home].value = value
            placed = home
        else:
            placed = self._free
            slots[placed].value = value
            index = home
            while (following := slots[index].next) is not None:
                index = following
            slots[index].next = placed
        while self._free >= 0 and slots[self._free].value is not None:
            self._free -= 1
        return placed

    def find(self, value: int) -> Optional[int]:
        """Return the index holding ``value``, or None if it is not found."""
        index: Optional[int] = value % self.size
        while index is not None:
            slot = self._slots[index]
            if slot.value == value:
                return index
            index = slot.next
        return None

    def remove(self, value: int) -> None:
        """Remove ``value`` from its chain; raise KeyError if it is not found."""
        slots = self._slots
        index = value % self.size
        head = slots[index]
        if head.value == value:
            if head.next is None:
                head.value = None
            else:
                following = slots[head.next]
                head.value, head.next = following.value, following.next
                following.value = following.next = None
            return
        while (following_index := slots[index].next) is not None:
            previous, index = index, following_index
            slot = slots[index]
            if slot.value == value:
                slots[previous].next = slot.next
                slot.value = slot.next = None
                return
        raise KeyError(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None

    def slots(self) -> list[tuple[Optional[int], Optional[int]]]:
        """Return ``(value, next)`` for every slot, ``None`` marking empty parts."""
        return [(slot.value, slot.next) for slot in self._slots]

    def __repr__(self) -> str:
        return f"CoalescedHashTable({self.slots()!r})"


class CellarHashTable:
    """Coalesced hashing with a separate overflow area (the cellar).

    Values hash to ``value % address_size``; collisions are placed in the
    cellar, the slots from ``address_size`` to ``size - 1``, taken from the
    top down. Inserting a value already present returns its index instead
    of storing it again.
    """

    def __init__(self, size: int = 100, address_size: int = 10) -> None:
        if not 1 <= address_size <= size:
            raise ValueError(
                f"address size must lie between 1 and size ({size}), got {address_size}"
            )
        self.size = size
        self.address_size = address_size
        self._keys: list[Optional[int]] = [None] * size
        self._next: list[Optional[int]] = [None] * size
        self._free = size - 1

    def insert(self, value: int) -> int:
        """Store a value and return its index; raise TableFullError when the cellar is exhausted."""
        keys, links = self._keys, self._next
        index = value % self.address_size
        if keys[index] is not None and keys[index] != value:
            last = index
            current: Optional[int] = index
            while current is not None and keys[current] != value:
                last = current
                current = links[current]
            if current is None:
                while self._free >= 0 and keys[self._free] is not None:
                    self._free -= 1
                if self._free < self.address_size:
                    raise TableFullError("hash table cellar is full")
                links[last] = self._free
                index = self._free
            else:
                index = current
        keys[index] = value
        return index

    def find(self, value: int) -> Optional[int]:
        """Return the index holding ``value``, or None if it is not found."""
        index: Optional[int] = value % self.address_size
        while index is not None:
            if self._keys[index] == value:
                return index
            index = self._next[index]
        return None

    def remove(self, value: int) -> None:
        """Remove ``value``; raise KeyError if it is not found.

        Removing the value in a home slot shifts the rest of its chain up by
        one node; removing one further along unlinks that node.
        """
        keys, links = self._keys, self._next
        home = value % self.address_size
        if keys[home] == value:
            previous: Optional[int] = None
            current = home
            while (following := links[current]) is not None:
                keys[current] = keys[following]
                previous, current = current, following
            keys[current] = None
            if previous is not None:
                links[previous] = None
            return
        previous_index = home
        current_index = links[home]
        while current_index is not None:
            if keys[current_index] == value:
                links[previous_index] = links[current_index]
                keys[current_index] = None
                links[current_index] = None
                return
            previous_index, current_index = current_index, links[current_index]
        raise KeyError(value)

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.find(value) is not None

    def __repr__(self) -> str:
        return (
            f"CellarHashTable(size={self.size}, address_size={self.address_size}, "
            f"keys={self._keys!r})"
        )