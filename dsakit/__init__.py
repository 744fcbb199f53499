"""Classic data structures (stacks, queues, linked lists, binary trees) and array algorithms."""

__version__ = "0.1.0"