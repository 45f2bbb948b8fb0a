"""A doubly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["DoublyLinkedList"]


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = None
    next: Optional["_Node"] = None


class DoublyLinkedList:
    """A list whose nodes link both forwards and backwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def push_front(self, value: Any) -> None:
        """Add a value before the head."""
        node = _Node(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, value: Any) -> None:
        """Add a value after the tail."""
        node = _Node(value, self._tail, None)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the tail value; raise IndexError when empty."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._tail)

    def insert(self, index: int, value: Any) -> None:
        """Insert a value so that it ends up at ``index`` (0 to len inclusive)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.push_front(value)
        elif index == self._size:
            self.push_back(value)
        else:
            after = self._node_at(index)
            before = after.prev
            assert before is not None
            node = _Node(value, before, after)
            before.next = node
            after.prev = node
            self._size += 1

    def delete_at(self, index: int) -> Any:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range")
        return self._unlink(self._node_at(index))

    def _node_at(self, index: int) -> _Node:
        if index < self._size // 2:
            node = self._head
            for _ in range(index):
                assert node is not None
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - index):
                assert node is not None
                node = node.prev
        assert node is not None
        return node

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"