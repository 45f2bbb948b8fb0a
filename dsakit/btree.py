"""A B-tree of comparable keys with insertion, deletion and in-order iteration."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort_right
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Optional

__all__ = ["BTree"]


@dataclass(slots=True)
class _Node:
    keys: list[Any] = field(default_factory=list)
    children: list["_Node"] = field(default_factory=list)

    @property
    def leaf(self) -> bool:
        return not self.children


class BTree:
    """A B-tree of minimum degree ``min_degree``.

    Every node other than the root holds between ``min_degree - 1`` and
    ``2 * min_degree - 1`` keys. Equal keys may be stored more than once.
    """

    def __init__(self, min_degree: int = 3) -> None:
        if min_degree < 2:
            raise ValueError(f"minimum degree must be at least 2, got {min_degree}")
        self.min_degree = min_degree
        self._root: Optional[_Node] = None
        self._size = 0

    def insert(self, key: Any) -> None:
        """Add a key, splitting full nodes on the way down."""
        t = self.min_degree
        root = self._root
        if root is None:
            self._root = _Node([key])
        elif len(root.keys) == 2 * t - 1:
            new_root = _Node([], [root])
            self._split_child(new_root, 0)
            index = 1 if new_root.keys[0] < key else 0
            self._insert_non_full(new_root.children[index], key)
            self._root = new_root
        else:
            self._insert_non_full(root, key)
        self._size += 1

    def remove(self, key: Any) -> None:
        """Remove one occurrence of ``key``; raise KeyError if it is absent."""
        if self._root is None or key not in self:
            raise KeyError(key)
        self._remove(self._root, key)
        self._size -= 1
        root = self._root
        if not root.keys:
            self._root = None if root.leaf else root.children[0]

    def __contains__(self, key: object) -> bool:
        node = self._root
        while node is not None:
            index = bisect_left(node.keys, key)
            if index < len(node.keys) and node.keys[index] == key:
                return True
            if node.leaf:
                return False
            node = node.children[index]
        return False

    def __iter__(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        if self._root is not None:
            yield from self._walk(self._root)

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BTree({list(self)!r}, min_degree={self.min_degree})"

    def _walk(self, node: _Node) -> Iterator[Any]:
        if node.leaf:
            yield from node.keys
            return
        for child, key in zip(node.children, node.keys):
            yield from self._walk(child)
            yield key
        yield from self._walk(node.children[-1])

    def _split_child(self, node: _Node, index: int) -> None:
        t = self.min_degree
        full = node.children[index]
        sibling = _Node(full.keys[t:], full.children[t:])
        median = full.keys[t - 1]
        full.keys = full.keys[: t - 1]
        full.children = full.children[:t]
        node.children.insert(index + 1, sibling)
        node.keys.insert(index, median)

    def _insert_non_full(self, node: _Node, key: Any) -> None:
        t = self.min_degree
        while not node.leaf:
            index = bisect_right(node.keys, key)
            if len(node.children[index].keys) == 2 * t - 1:
                self._split_child(node, index)
                if node.keys[index] < key:
                    index += 1
            node = node.children[index]
        insort_right(node.keys, key)

    def _remove(self, node: _Node, key: Any) -> None:
        index = bisect_left(node.keys, key)
        if index < len(node.keys) and node.keys[index] == key:
            if node.leaf:
                del node.keys[index]
            else:
                self._remove_from_internal(node, index)
            return
        if node.leaf:
            raise KeyError(key)
        at_end = index == len(node.keys)
        if len(node.children[index].keys) < self.min_degree:
            self._fill(node, index)
        if at_end and index > len(node.keys):
            self._remove(node.children[index - 1], key)
        else:
            self._remove(node.children[index], key)

    def _remove_from_internal(self, node: _Node, index: int) -> None:
        t = self.min_degree
        key = node.keys[index]
        left, right = node.children[index], node.children[index + 1]
        if len(left.keys) >= t:
            current = left
            while not current.leaf:
                current = current.children[-1]
            predecessor = current.keys[-1]
            node.keys[index] = predecessor
            self._remove(left, predecessor)
        elif len(right.keys) >= t:
            current = right
            while not current.leaf:
                current = current.children[0]
            successor = current.keys[0]
            node.keys[index] = successor
            self._remove(right, successor)
        else:
            self._merge(node, index)
            self._remove(left, key)

    def _fill(self, node: _Node, index: int) -> None:
        t = self.min_degree
        if index != 0 and len(node.children[index - 1].keys) >= t:
            self._borrow_from_previous(node, index)
        elif index != len(node.keys) and len(node.children[index + 1].keys) >= t:
            self._borrow_from_next(node, index)
        elif index != len(node.keys):
            self._merge(node, index)
        else:
            self._merge(node, index - 1)

    @staticmethod
    def _borrow_from_previous(node: _Node, index: int) -> None:
        child, sibling = node.children[index], node.children[index - 1]
        child.keys.insert(0, node.keys[index - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[index - 1] = sibling.keys.pop()

    @staticmethod
    def _borrow_from_next(node: _Node, index: int) -> None:
        child, sibling = node.children[index], node.children[index + 1]
        child.keys.append(node.keys[index])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[index] = sibling.keys.pop(0)

    @staticmethod
    def _merge(node: _Node, index: int) -> None:
        child, sibling = node.children[index], node.children[index + 1]
        child.keys.append(node.keys.pop(index))
        child.keys.extend(sibling.keys)
        child.children.extend(sibling.children)
        del node.children[index + 1]