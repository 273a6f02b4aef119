"""Binary tree nodes and binary search tree operations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding ``value`` and two optional children."""

    value: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def insert(root: TreeNode | None, key: Any) -> TreeNode:
    """Insert ``key`` into a search tree and return its root; duplicates are ignored."""
    if root is None:
        return TreeNode(key)
    node = root
    while True:
        if key < node.value:
            if node.left is None:
                node.left = TreeNode(key)
                break
            node = node.left
        elif key > node.value:
            if node.right is None:
                node.right = TreeNode(key)
                break
            node = node.right
        else:
            break
    return root


def search(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in a search tree, or None."""
    node = root
    while node is not None and node.value != key:
        node = node.right if node.value < key else node.left
    return node


def delete(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Remove ``key`` from a search tree and return the new root."""
    parent: TreeNode | None = None
    node = root
    while node is not None and node.value != key:
        parent = node
        node = node.right if node.value < key else node.left
    if node is None:
        return root

    if node.left is not None and node.right is not None:
        successor_parent = node
        successor = node.right
        while successor.left is not None:
            successor_parent = successor
            successor = successor.left
        if successor_parent is node:
            successor_parent.right = successor.right
        else:
            successor_parent.left = successor.right
        node.value = successor.value
        return root

    child = node.left if node.left is not None else node.right
    if parent is None:
        return child
    if parent.left is node:
        parent.left = child
    else:
        parent.right = child
    return root


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values of the tree in in-order sequence."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.value)
        node = node.right
    return result


def height(root: TreeNode | None) -> int:
    """Return the number of levels of the tree, zero for an empty tree."""
    levels = 0
    level = deque([root] if root is not None else [])
    while level:
        levels += 1
        for _ in range(len(level)):
            node = level.popleft()
            level.extend(child for child in (node.left, node.right) if child is not None)
    return levels


def transform_to_greater_sum(root: TreeNode | None) -> TreeNode | None:
    """Replace each value with the sum of all greater values, in place; return the root."""
    running = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        running += node.value
        node.value = running - node.value
        node = node.left
    return root