"""A hash table of integers using separate chaining with sorted chains."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["ChainedHashTable"]


class ChainedHashTable:
    """Values hash to ``value % size``; each bucket keeps its values in ascending order.

    Equal values may be stored more than once.
    """

    def __init__(self, size: int = 101) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _bucket(self, value: int) -> list[int]:
        return self._buckets[value % self.size]

    def insert(self, value: int) -> None:
        """Add a value in order within its bucket."""
        bucket = self._bucket(value)
        position = next((i for i, item in enumerate(bucket) if not item < value), len(bucket))
        bucket.insert(position, value)

    def remove(self, value: int) -> None:
        """Remove one occurrence of ``value``; raise KeyError if it is absent."""
        bucket = self._bucket(value)
        try:
            bucket.remove(value)
        except ValueError:
            raise KeyError(value) from None

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, int):
            return False
        for item in self._bucket(value):
            if item >= value:
                return item == value
        return False

    def buckets(self) -> list[list[int]]:
        """Return a copy of every bucket, in index order."""
        return [list(bucket) for bucket in self._buckets]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __iter__(self) -> Iterator[int]:
        for bucket in self._buckets:
            yield from bucket

    def __repr__(self) -> str:
        return f"ChainedHashTable(size={self.size}, buckets={self.buckets()!r})"