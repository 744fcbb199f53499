"""Exceptions raised by the containers in this package."""


class EmptyContainerError(IndexError):
    """Raised when an element is read or removed from an empty container."""

    def __init__(self, message: str = "container is empty") -> None:
        super().__init__(message)


class FullContainerError(IndexError):
    """Raised when an element is added to a container that has no room left."""

    def __init__(self, message: str = "container is full") -> None:
        super().__init__(message)