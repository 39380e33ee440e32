"""Fixed-size memory arenas handed out through allocation policies."""

from __future__ import annotations

from abc import ABC, abstractmethod


class MemPolicy(ABC):
    """Strategy that carves blocks out of an attached arena."""

    @abstractmethod
    def alloc(self, size):
        """Return a writable view of ``size`` bytes from the arena."""

    @abstractmethod
    def free(self, ptr):
        """Give memory back to the policy."""

    @abstractmethod
    def set_mem(self, arena):
        """Attach the policy to a new arena."""


class LinearPolicy(MemPolicy):
    """Bump allocator: blocks are handed out in order, freed all at once."""

    def __init__(self, capacity, arena=None):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._arena: memoryview | None = None
        self._next = 0
        if arena is not None:
            self.set_mem(arena)

    @property
    def used(self) -> int:
        """Number of bytes handed out since the last reset."""
        return self._next

    def set_mem(self, arena):
        if arena is None:
            self._arena = None
        else:
            view = memoryview(arena)
            if view.readonly:
                raise ValueError("arena must be writable")
            if view.nbytes < self.capacity:
                raise ValueError("arena is smaller than the policy capacity")
            self._arena = view.cast("B")
        self._next = 0

    def alloc(self, size):
        if self._arena is None:
            raise RuntimeError("no memory attached to the policy")
        if size < 0:
            raise ValueError("size must not be negative")
        if self._next + size >= self.capacity:
            raise MemoryError(
                f"cannot allocate {size} bytes: {self._next} of {self.capacity} in use"
            )
        block = self._arena[self._next:self._next + size]
        self._next += size
        return block

    def free(self, ptr=None):
        self._next = 0


class Allocator:
    """Owns an arena of ``capacity`` bytes and serves it linearly."""

    def __init__(self, capacity=1024):
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._arena = bytearray(capacity)
        self._policy = LinearPolicy(capacity, self._arena)
        self._closed = False

    def _check_open(self):
        if self._closed:
            raise ValueError("allocator is closed")

    def alloc(self, size):
        self._check_open()
        return self._policy.alloc(size)

    def free(self, ptr=None):
        self._check_open()
        self._policy.free(ptr)

    def close(self):
        """Wipe the arena and detach it; further use raises ValueError."""
        if self._closed:
            return
        self._arena[:] = bytes(self.capacity)
        self._policy.set_mem(None)
        self._closed = True

    def __enter__(self):
        self._check_open()
        return self

    def __exit__(self, *args):
        self.close()
        return False