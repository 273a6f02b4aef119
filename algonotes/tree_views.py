"""Top, bottom, left and right views of a binary tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from algonotes.trees import TreeNode


def _horizontal_sweep(root: TreeNode | None) -> Iterator[tuple[int, Any]]:
    """Yield (horizontal distance, value) for every node in level order."""
    if root is None:
        return
    pending: deque[tuple[TreeNode, int]] = deque([(root, 0)])
    while pending:
        node, distance = pending.popleft()
        yield distance, node.value
        if node.left is not None:
            pending.append((node.left, distance - 1))
        if node.right is not None:
            pending.append((node.right, distance + 1))


def top_view(root: TreeNode | None) -> list[Any]:
    """Return the values seen from above, from the leftmost column to the rightmost.

    In each column the node reached first in level order is seen.
    """
    first: dict[int, Any] = {}
    for distance, value in _horizontal_sweep(root):
        first.setdefault(distance, value)
    return [first[distance] for distance in sorted(first)]


def bottom_view(root: TreeNode | None) -> list[Any]:
    """Return the values seen from below, from the leftmost column to the rightmost.

    In each column the node reached last in level order is seen.
    """
    last: dict[int, Any] = {}
    for distance, value in _horizontal_sweep(root):
        last[distance] = value
    return [last[distance] for distance in sorted(last)]


def _side_view(root: TreeNode | None, from_left: bool) -> list[Any]:
    seen: list[Any] = []
    stack: list[tuple[TreeNode, int]] = [(root, 0)] if root is not None else []
    while stack:
        node, depth = stack.pop()
        if depth == len(seen):
            seen.append(node.value)
        near, far = (node.left, node.right) if from_left else (node.right, node.left)
        if far is not None:
            stack.append((far, depth + 1))
        if near is not None:
            stack.append((near, depth + 1))
    return seen


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the first value of each level when the tree is seen from the left."""
    return _side_view(root, from_left=True)


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the first value of each level when the tree is seen from the right."""
    return _side_view(root, from_left=False)