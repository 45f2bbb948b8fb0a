"""A binary search tree of distinct values with traversals and simple queries."""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

__all__ = ["BSTNode", "BinarySearchTree", "is_prime", "parse_values", "load_tree"]


@dataclass(eq=False)
class BSTNode:
    """One node of a binary tree."""

    value: Any
    left: Optional["BSTNode"] = None
    right: Optional["BSTNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def is_prime(number: int) -> bool:
    """Return True when ``number`` is a prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, math.isqrt(number) + 1))


class BinarySearchTree:
    """A binary search tree; inserting a value already present does nothing.

    Removing a node with two children replaces its value with that of its
    in-order predecessor, the largest value of its left subtree.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Optional[BSTNode] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> bool:
        """Add a value; return False if it was already present."""
        if self.root is None:
            self.root = BSTNode(value)
            self._size += 1
            return True
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    break
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def _replace_child(
        self, parent: Optional[BSTNode], old: BSTNode, new: Optional[BSTNode]
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def remove(self, value: Any) -> None:
        """Remove ``value``; raise KeyError if it is not in the tree."""
        parent: Optional[BSTNode] = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)
        if node.left is not None and node.right is not None:
            pred_parent, pred = node, node.left
            while pred.right is not None:
                pred_parent, pred = pred, pred.right
            node.value = pred.value
            self._replace_child(pred_parent, pred, pred.left)
        else:
            child = node.left if node.left is not None else node.right
            self._replace_child(parent, node, child)
        self._size -= 1

    def search(self, value: Any) -> Optional[BSTNode]:
        """Return the node holding ``value``, or None if it is absent."""
        node = self.root
        while node is not None:
            if value == node.value:
                return node
            node = node.right if value > node.value else node.left
        return None

    def __contains__(self, value: object) -> bool:
        try:
            return self.search(value) is not None
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Any]:
        """Yield values in ascending order."""
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.preorder()!r})"

    def _preorder_nodes(self) -> Iterator[BSTNode]:
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return [node.value for node in self._preorder_nodes()]

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        result: list[Any] = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def reverse_inorder(self) -> list[Any]:
        """Values in descending order."""
        result: list[Any] = []
        stack: list[BSTNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.right
            node = stack.pop()
            result.append(node.value)
            node = node.left
        return result

    def leaves(self) -> list[Any]:
        """Values of nodes without children, in preorder."""
        return [node.value for node in self._preorder_nodes() if node.is_leaf]

    def nodes_with_children(self) -> list[Any]:
        """Values of nodes with at least one child, in preorder."""
        return [node.value for node in self._preorder_nodes() if not node.is_leaf]

    def nodes_with_two_children(self) -> list[Any]:
        """Values of nodes with both children, in preorder."""
        return [
            node.value
            for node in self._preorder_nodes()
            if node.left is not None and node.right is not None
        ]

    def minimum(self) -> Any:
        """Smallest value; raise ValueError when the tree is empty."""
        node = self.root
        if node is None:
            raise ValueError("tree is empty")
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Any:
        """Largest value; raise ValueError when the tree is empty."""
        node = self.root
        if node is None:
            raise ValueError("tree is empty")
        while node.right is not None:
            node = node.right
        return node.value

    def count_primes(self) -> int:
        """Number of values in the tree that are primes."""
        return sum(1 for value in self if is_prime(value))

    def total(self) -> Any:
        """Sum of all values."""
        return sum(self)


_SEPARATORS = re.compile(r"[\s,;]+")


def parse_values(text: str) -> list[int]:
    """Read integers separated by whitespace, commas or semicolons.

    Raises ValueError on any token that is not an integer.
    """
    tokens = [token for token in _SEPARATORS.split(text) if token]
    values: list[int] = []
    for token in tokens:
        try:
            values.append(int(token))
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None
    return values


def load_tree(path: Union[str, Path]) -> BinarySearchTree:
    """Build a tree from the integers in a file; see :func:`parse_values`."""
    return BinarySearchTree(parse_values(Path(path).read_text()))