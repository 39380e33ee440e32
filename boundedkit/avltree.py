"""Self-balancing AVL tree with a fixed node budget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    data: Any
    height: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node):
    return node.height if node is not None else 0


def _balance(node):
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update(node):
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y):
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x):
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


class AVLTree:
    """AVL tree holding at most ``capacity`` nodes; items need ``<``.

    Equal items are placed in the right subtree.
    """

    def __init__(self, capacity=1024):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._root: _Node | None = None
        self._count = 0

    def insert(self, data):
        if self._count >= self.capacity:
            raise MemoryError("tree capacity exhausted")
        self._root = self._insert(self._root, data)
        self._count += 1

    def _insert(self, node, data):
        if node is None:
            return _Node(data)
        if data < node.data:
            node.left = self._insert(node.left, data)
        else:
            node.right = self._insert(node.right, data)

        _update(node)
        balanced = _balance(node)
        if balanced > 1:
            if _balance(node.left) < 0:
                node.left = _rotate_left(node.left)
            return _rotate_right(node)
        if balanced < -1:
            if _balance(node.right) > 0:
                node.right = _rotate_right(node.right)
            return _rotate_left(node)
        return node

    def __len__(self):
        return self._count

    def __iter__(self):
        """Yield items in sorted order."""
        stack = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def height(self):
        return _height(self._root)

    def root(self):
        """Item stored at the root, or None for an empty tree."""
        return None if self._root is None else self._root.data