"""Circular linked lists: a singly linked ring and a doubly linked ring."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["CircularList", "CircularDoublyLinkedList"]


@dataclass(slots=True, eq=False)
class _Link:
    value: Any
    next: Optional["_Link"] = None


@dataclass(slots=True, eq=False)
class _DoubleLink:
    value: Any
    prev: Optional["_DoubleLink"] = None
    next: Optional["_DoubleLink"] = None


class CircularList:
    """A singly linked ring whose last node points back to the first.

    Iteration starts at the first node; ``CircularList(values)`` iterates in
    the same order as ``values``.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: Optional[_Link] = None
        self._size = 0
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, value: Any) -> None:
        """Make ``value`` the new first element."""
        node = _Link(value)
        if self._last is None:
            node.next = node
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first element; raise IndexError when empty."""
        if self._last is None:
            raise IndexError("pop from an empty list")
        first = self._last.next
        assert first is not None
        if first is self._last:
            self._last = None
        else:
            self._last.next = first.next
        first.next = None
        self._size -= 1
        return first.value

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        start = self._last.next
        node = start
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is start:
                return

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularList({list(self)!r})"


class CircularDoublyLinkedList:
    """A doubly linked ring; the tail is always the node before the head."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleLink] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _add_first_node(self, value: Any) -> None:
        node = _DoubleLink(value)
        node.prev = node.next = node
        self._head = node
        self._size = 1

    def _link_between(self, value: Any, before: _DoubleLink, after: _DoubleLink) -> _DoubleLink:
        node = _DoubleLink(value, before, after)
        before.next = node
        after.prev = node
        self._size += 1
        return node

    def _unlink(self, node: _DoubleLink) -> Any:
        if self._size == 1:
            self._head = None
        else:
            assert node.prev is not None and node.next is not None
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def _nodes(self) -> Iterator[_DoubleLink]:
        head = self._head
        if head is None:
            return
        node = head
        while True:
            yield node
            assert node.next is not None
            node = node.next
            if node is head:
                return

    def _find(self, target: Any) -> _DoubleLink:
        for node in self._nodes():
            if node.value == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    def push_front(self, value: Any) -> None:
        """Add a value before the head and make it the new head."""
        if self._head is None:
            self._add_first_node(value)
            return
        assert self._head.prev is not None
        self._head = self._link_between(value, self._head.prev, self._head)

    def push_back(self, value: Any) -> None:
        """Add a value after the tail."""
        if self._head is None:
            self._add_first_node(value)
            return
        assert self._head.prev is not None
        self._link_between(value, self._head.prev, self._head)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after the first node holding ``target``.

        An empty list simply receives the value. Raises ValueError when the
        list is not empty and ``target`` is absent.
        """
        if self._head is None:
            self._add_first_node(value)
            return
        node = self._find(target)
        assert node.next is not None
        self._link_between(value, node, node.next)

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` before the first node holding ``target``.

        An empty list simply receives the value; inserting before the head
        makes the value the new head. Raises ValueError when ``target`` is
        absent from a non-empty list.
        """
        if self._head is None:
            self._add_first_node(value)
            return
        if self._head.value == target:
            self.push_front(value)
            return
        node = self._find(target)
        assert node.prev is not None
        self._link_between(value, node.prev, node)

    def pop_front(self) -> Any:
        """Remove and return the head value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the tail value; raise IndexError when empty."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        assert self._head.prev is not None
        return self._unlink(self._head.prev)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``; raise ValueError if absent."""
        self._unlink(self._find(value))

    def positions(self, value: Any) -> list[int]:
        """Return the 1-based positions of every element equal to ``value``."""
        return [position for position, item in enumerate(self, start=1) if item == value]

    def reverse(self) -> None:
        """Reverse the list in place."""
        if self._head is None:
            return
        for node in list(self._nodes()):
            node.prev, node.next = node.next, node.prev
        self._head = self._head.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"