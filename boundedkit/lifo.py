"""Last-in, first-out stack with fixed capacity."""

from __future__ import annotations

from boundedkit.vector import Vector


class Stack:
    """LIFO stack holding at most ``capacity`` items."""

    def __init__(self, capacity=16):
        self._items = Vector(capacity)

    def push(self, item):
        self._items.add(item)

    def pop(self):
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.remove(len(self._items) - 1)

    def top(self):
        """Most recently pushed item."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def back(self):
        """Item at the bottom of the stack."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[0]

    def __len__(self):
        return len(self._items)