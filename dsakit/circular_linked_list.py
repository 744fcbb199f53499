"""A singly linked list whose tail points back to its head."""

from typing import Any

from dsakit.linked_list import _Chain, _Node


class CircularLinkedList(_Chain):
    """Circular list with insertion and removal at the head and the tail."""

    _empty_message = "List is empty"

    def _insert(self, val: Any, at_head: bool) -> None:
        node = _Node(val, self._head)
        if self._head is None:
            node.next = node
            self._head = self._tail = node
        else:
            self._tail.next = node
            if at_head:
                self._head = node
            else:
                self._tail = node
        self._size += 1

    def _detach(self, node: _Node) -> Any:
        node.next = None
        self._size -= 1
        return node.data

    def insert_at_head(self, val: Any) -> None:
        """Add a value before the head."""
        self._insert(val, at_head=True)

    def insert_at_tail(self, val: Any) -> None:
        """Add a value after the tail."""
        self._insert(val, at_head=False)

    def delete_at_head(self) -> Any:
        """Remove and return the value at the head."""
        self._require_items()
        node = self._head
        if node is self._tail:
            self._head = self._tail = None
        else:
            self._head = node.next
            self._tail.next = self._head
        return self._detach(node)

    def delete_at_tail(self) -> Any:
        """Remove and return the value at the tail."""
        self._require_items()
        node = self._tail
        if node is self._head:
            self._head = self._tail = None
        else:
            prev = self._head
            while prev.next is not node:
                prev = prev.next
            prev.next = self._head
            self._tail = prev
        return self._detach(node)

    def display(self) -> str:
        """Return the values from head round to tail, separated by spaces."""
        return self._spaced("List is empty")