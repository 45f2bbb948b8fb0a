"""A singly linked list with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["SinglyLinkedList"]


@dataclass(slots=True)
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A singly linked list that keeps a tail pointer for cheap appends."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, index: int, value: Any) -> None:
        """Insert a value so that it ends up at ``index`` (0 to len inclusive)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == self._size:
            self.append(value)
            return
        if index == 0:
            self._head = _Node(value, self._head)
        else:
            before = self._node_at(index - 1)
            before.next = _Node(value, before.next)
        self._size += 1

    def replace_all(self, old: Any, new: Any) -> int:
        """Replace every value equal to ``old`` with ``new``; return how many changed."""
        changed = 0
        node = self._head
        while node is not None:
            if node.value == old:
                node.value = new
                changed += 1
            node = node.next
        return changed

    def value_at(self, index: int) -> Any:
        """Return the value at ``index``; raise IndexError when out of range."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return self._node_at(index).value

    def delete_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        if index == 0:
            assert self._head is not None
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(index - 1)
            removed = before.next
            assert removed is not None
            before.next = removed.next
            if removed is self._tail:
                self._tail = before
        self._size -= 1
        return removed.value

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None:
            if node.value == value:
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                if node is self._tail:
                    self._tail = previous
                self._size -= 1
                return
            previous, node = node, node.next
        raise ValueError(f"{value!r} is not in the list")

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"