"""Binary trees built from a preorder listing, with the classic traversals."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional

NULL_MARKER = -1
"""Value that marks a missing child in a preorder listing."""


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def build_tree(preorder_values: Iterable[Any]) -> TreeNode | None:
    """Build a tree from a preorder listing in which ``-1`` marks an empty child.

    Values left over once the tree is complete are ignored. Raises
    ValueError when the listing ends before the tree is complete.
    """
    values = iter(preorder_values)

    def build() -> TreeNode | None:
        try:
            value = next(values)
        except StopIteration:
            raise ValueError(
                "preorder listing ends before the tree is complete"
            ) from None
        if value == NULL_MARKER:
            return None
        node = TreeNode(value)
        node.left = build()
        node.right = build()
        return node

    return build()


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in root, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, root, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, root order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Return the values level by level, each level from left to right."""
    levels: list[list[Any]] = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels