"""A doubly linked list."""

from collections.abc import Iterator
from typing import Any

from dsakit.linked_list import _Chain, _Node, _render, _values


class DoublyLinkedList(_Chain):
    """List linked in both directions, with insertion and removal at both ends."""

    def push_front(self, val: Any) -> None:
        """Add a value at the head."""
        node = _Node(val, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def push_back(self, val: Any) -> None:
        """Add a value at the tail."""
        self._link_back(val)

    def pop_front(self) -> Any:
        """Remove and return the value at the head."""
        return self._unlink_front()

    def pop_back(self) -> Any:
        """Remove and return the value at the tail."""
        self._require_items()
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        node.prev = None
        self._size -= 1
        return node.data

    def display_forward(self) -> str:
        """Return the values head to tail as ``a->b->...->NULL``."""
        return _render(self, "->")

    def display_backward(self) -> str:
        """Return the values tail to head as ``z<->y<->...<->NULL``."""
        return _render(reversed(self), "<->")

    def __reversed__(self) -> Iterator[Any]:
        return _values(self._tail, "prev")