"""A short character string with a fixed capacity."""

from __future__ import annotations

from boundedkit.vector import Vector


class BoundedString:
    """Mutable string of at most ``CAPACITY`` characters."""

    CAPACITY = 24

    def __init__(self, text=""):
        self._chars = Vector(self.CAPACITY)
        self += text

    def remove(self, ch):
        """Remove the first occurrence of ``ch``, if any, and return self."""
        for idx, current in enumerate(self._chars):
            if current == ch:
                self._chars.remove(idx)
                break
        return self

    def __len__(self):
        return len(self._chars)

    def __iadd__(self, other):
        if isinstance(other, BoundedString):
            other = str(other)
        if not isinstance(other, str):
            return NotImplemented
        if len(self._chars) + len(other) > self.CAPACITY:
            raise OverflowError("capacity exceeded")
        for ch in other:
            self._chars.add(ch)
        return self

    def __eq__(self, other):
        if isinstance(other, BoundedString):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None

    def __str__(self):
        return "".join(self._chars)

    def __repr__(self):
        return f"BoundedString({str(self)!r})"