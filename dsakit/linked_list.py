"""A singly linked list, plus the node chain shared by the linked containers."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from dsakit.errors import EmptyContainerError


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional["_Node"] = None
    prev: Optional["_Node"] = None


def _values(start: Optional[_Node], link: str = "next") -> Iterator[Any]:
    """Yield node data following ``link``; stop at the end or back at ``start``."""
    node = start
    while node is not None:
        yield node.data
        node = getattr(node, link)
        if node is start:
            break


def _render(values: Iterable[Any], separator: str) -> str:
    return "".join(f"{v}{separator}" for v in values) + "NULL"


class _Chain:
    """Head, tail and size bookkeeping common to the linked containers."""

    _empty_message = "list is empty"

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _require_items(self) -> None:
        if self._head is None:
            raise EmptyContainerError(self._empty_message)

    def _link_back(self, val: Any) -> None:
        node = _Node(val, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _unlink_front(self) -> Any:
        self._require_items()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        self._size -= 1
        return node.data

    def _spaced(self, empty_text: str) -> str:
        if self._head is None:
            return empty_text
        return " ".join(str(v) for v in self)

    def is_empty(self) -> bool:
        """Return True when the container holds no values."""
        return self._head is None

    def __iter__(self) -> Iterator[Any]:
        return _values(self._head)

    def __len__(self) -> int:
        return self._size


class LinkedList(_Chain):
    """Singly linked list with insertion at either end and removal by value."""

    def append(self, val: Any) -> None:
        """Add a value at the end of the list."""
        self._link_back(val)

    def prepend(self, val: Any) -> None:
        """Add a value at the beginning of the list."""
        node = _Node(val, self._head)
        if self._tail is None:
            self._tail = node
        self._head = node
        self._size += 1

    def remove(self, val: Any) -> bool:
        """Remove the first node holding ``val``; return whether one was found."""
        prev: _Node | None = None
        node = self._head
        while node is not None and node.data != val:
            prev, node = node, node.next
        if node is None:
            return False
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._size -= 1
        return True

    def display(self) -> str:
        """Return the list as ``a->b->...->NULL``."""
        return _render(self, "->")