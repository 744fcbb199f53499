"""A fixed-capacity queue on a ring buffer."""

from collections.abc import Iterator
from typing import Any

from dsakit.errors import EmptyContainerError, FullContainerError


class CircularQueue:
    """FIFO queue that stores at most ``capacity`` values in a ring."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._rear = -1
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def push(self, val: Any) -> None:
        """Add a value at the back; raise FullContainerError when full."""
        if self._size == self.capacity:
            raise FullContainerError("CQ is full")
        self._rear = (self._rear + 1) % self.capacity
        self._slots[self._rear] = val
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the value at the front."""
        val = self.front()
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return val

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise EmptyContainerError("CQ is empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._size == 0

    def slots(self) -> list[Any]:
        """Return a copy of the underlying ring, unused slots included."""
        return list(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]