"""A queue with a fixed number of slots that are reclaimed only when it empties."""

from __future__ import annotations

from collections import deque

DEFAULT_CAPACITY = 1000


class QueueFullError(OverflowError):
    """No free slot is left for another element."""


class ArrayQueue:
    """A FIFO queue backed by ``capacity`` slots.

    One slot is never used, and slots freed by dequeuing become available
    again only once the queue is empty.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[int] = deque()
        self._used = 0

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, value: int) -> None:
        """Add a value at the back; QueueFullError when no slot is free."""
        if self._used >= self.capacity - 1:
            raise QueueFullError("queue is full")
        self._items.append(value)
        self._used += 1

    def dequeue(self) -> int:
        """Remove and return the front value; IndexError when empty."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        value = self._items.popleft()
        if not self._items:
            self._used = 0
        return value

    def front(self) -> int:
        """The front value; IndexError when empty."""
        if not self._items:
            raise IndexError("the queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items