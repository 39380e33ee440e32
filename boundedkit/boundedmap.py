"""A small associative container with unique keys and fixed capacity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from boundedkit.vector import Vector


@dataclass
class _Entry:
    key: Any
    value: Any = None


class Map:
    """Mapping of unique keys kept in insertion order, at most ``capacity`` entries."""

    def __init__(self, capacity=16):
        self._entries = Vector(capacity)

    @property
    def capacity(self) -> int:
        return self._entries.capacity

    def _find(self, key):
        for entry in self._entries:
            if entry.key == key:
                return entry
        return None

    def add(self, key, value=None):
        """Insert ``key`` or overwrite its value if it already exists."""
        entry = self._find(key)
        if entry is not None:
            entry.value = value
            return
        self._entries.add(_Entry(key, value))

    def at(self, key):
        """Return the value for ``key``, or None if it is absent."""
        entry = self._find(key)
        return None if entry is None else entry.value

    def remove(self, key):
        """Remove ``key`` if present; absent keys are ignored."""
        for idx, entry in enumerate(self._entries):
            if entry.key == key:
                self._entries.remove(idx)
                break

    def __getitem__(self, key):
        entry = self._find(key)
        if entry is None:
            raise KeyError(key)
        return entry.value

    def __setitem__(self, key, value):
        self.add(key, value)

    def __contains__(self, key):
        return self._find(key) is not None

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return (entry.key for entry in self._entries)

    def items(self):
        return [(entry.key, entry.value) for entry in self._entries]

    def copy(self):
        clone = Map(self.capacity)
        for key, value in self.items():
            clone.add(key, value)
        return clone

    def __repr__(self):
        return f"Map({dict(self.items())!r})"