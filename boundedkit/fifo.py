"""First-in, first-out queue with fixed capacity."""

from __future__ import annotations

from boundedkit.vector import Vector


class Queue:
    """FIFO queue holding at most ``capacity`` items."""

    def __init__(self, capacity=16):
        self._items = Vector(capacity)

    def enqueue(self, item):
        self._items.add(item)

    def dequeue(self):
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.remove(0)

    def front(self):
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[0]

    def back(self):
        if not self._items:
            raise IndexError("queue is empty")
        return self._items[-1]

    def __len__(self):
        return len(self._items)