"""A last-in, first-out stack."""

from collections.abc import Iterator
from typing import Any

from dsakit.errors import EmptyContainerError


class Stack:
    """LIFO stack backed by a Python list."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, val: Any) -> None:
        """Put a value on top of the stack."""
        self._items.append(val)

    def pop(self) -> Any:
        """Remove and return the value on top of the stack."""
        val = self.top()
        self._items.pop()
        return val

    def top(self) -> Any:
        """Return the value on top of the stack without removing it."""
        if not self._items:
            raise EmptyContainerError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True when the stack holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack downwards."""
        return reversed(self._items)