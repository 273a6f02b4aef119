"""Root-to-leaf path sums and removal of nodes with a single child."""

from __future__ import annotations

from typing import Any

from algonotes.trees import TreeNode


def has_path_sum(root: TreeNode | None, total: Any) -> bool:
    """Return True if some root-to-leaf path has values adding up to ``total``."""
    if root is None:
        return False
    stack = [(root, total)]
    while stack:
        node, remaining = stack.pop()
        remaining -= node.value
        if node.left is None and node.right is None:
            if remaining == 0:
                return True
            continue
        stack.extend((child, remaining) for child in (node.right, node.left) if child is not None)
    return False


def remove_half_nodes(root: TreeNode | None) -> TreeNode | None:
    """Replace every node with exactly one child by that child; return the new root.

    Leaves are left in place.
    """
    if root is None:
        return None
    root.left = remove_half_nodes(root.left)
    root.right = remove_half_nodes(root.right)
    if root.left is None and root.right is not None:
        return root.right
    if root.right is None and root.left is not None:
        return root.left
    return root