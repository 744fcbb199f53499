"""A first-in, first-out queue built from singly linked nodes."""

from typing import Any

from dsakit.linked_list import _Chain


class LinkedQueue(_Chain):
    """FIFO queue that links nodes from head (front) to tail (back)."""

    _empty_message = "Queue is empty"

    def push(self, val: Any) -> None:
        """Add a value at the back of the queue."""
        self._link_back(val)

    def pop(self) -> Any:
        """Remove and return the value at the front of the queue."""
        return self._unlink_front()

    def front(self) -> Any:
        """Return the value at the front without removing it."""
        self._require_items()
        return self._head.data

    def is_empty(self) -> bool:
        """Return True when the queue holds no values."""
        return self._head is None

    def display(self) -> str:
        """Return the values from front to back, separated by spaces."""
        return self._spaced("Queue is empty Nothing to display")