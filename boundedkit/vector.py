"""A list with a fixed maximum capacity."""

from __future__ import annotations


class Vector:
    """Sequence holding at most ``capacity`` items."""

    def __init__(self, capacity=16):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list = []

    def add(self, item):
        if len(self._items) >= self.capacity:
            raise OverflowError("capacity exceeded")
        self._items.append(item)

    def remove(self, idx):
        """Remove and return the item at ``idx``, shifting later items down."""
        if not 0 <= idx < len(self._items):
            raise IndexError("index out of bound")
        return self._items.pop(idx)

    def at(self, idx):
        """Return the slot at ``idx``; unused slots below capacity are None."""
        if not 0 <= idx < self.capacity:
            raise IndexError("index out of bound")
        return self._items[idx] if idx < len(self._items) else None

    def __getitem__(self, idx):
        return self._items[idx]

    def __setitem__(self, idx, item):
        self._items[idx] = item

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self._items == other._items

    __hash__ = None

    def copy(self):
        clone = Vector(self.capacity)
        clone._items = list(self._items)
        return clone

    def __repr__(self):
        return f"Vector(capacity={self.capacity}, items={self._items!r})"