"""Binary search tree operations on TreeNode trees."""

from collections.abc import Iterable
from typing import Any

from dsakit.binary_tree import TreeNode


def insert(root: TreeNode | None, val: Any) -> TreeNode:
    """Insert ``val`` and return the root; equal values go to the right."""
    if root is None:
        return TreeNode(val)
    if val < root.data:
        root.left = insert(root.left, val)
    else:
        root.right = insert(root.right, val)
    return root


def build_bst(values: Iterable[Any]) -> TreeNode | None:
    """Build a search tree by inserting the values in order."""
    root: TreeNode | None = None
    for val in values:
        root = insert(root, val)
    return root


def search(root: TreeNode | None, val: Any) -> bool:
    """Return True when ``val`` is stored in the tree."""
    node = root
    while node is not None:
        if node.data == val:
            return True
        node = node.left if val < node.data else node.right
    return False


def inorder_successor(root: TreeNode | None) -> TreeNode | None:
    """Return the leftmost node of the subtree, or None for an empty one."""
    node = root
    while node is not None and node.left is not None:
        node = node.left
    return node


def delete_node(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Remove one node holding ``key`` and return the new root."""
    if root is None:
        return None
    if key < root.data:
        root.left = delete_node(root.left, key)
    elif key > root.data:
        root.right = delete_node(root.right, key)
    elif root.left is None:
        return root.right
    elif root.right is None:
        return root.left
    else:
        successor = inorder_successor(root.right)
        root.data = successor.data
        root.right = delete_node(root.right, successor.data)
    return root