"""Level-order and spiral traversals, and the diameter of a binary tree."""

from __future__ import annotations

from collections import deque
from typing import Any

from algonotes.trees import TreeNode, height


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, left to right, using a queue."""
    if root is None:
        return []
    result: list[Any] = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.value)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    return result


def _collect_level(
    node: TreeNode | None, depth: int, out: list[Any], right_first: bool = False
) -> None:
    if node is None:
        return
    if depth == 0:
        out.append(node.value)
        return
    children = (node.right, node.left) if right_first else (node.left, node.right)
    for child in children:
        _collect_level(child, depth - 1, out, right_first)


def level_order_recursive(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, visiting the tree once per level."""
    result: list[Any] = []
    for depth in range(height(root)):
        _collect_level(root, depth, result)
    return result


def spiral_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, alternating direction, using two stacks.

    The root level runs left to right, the next right to left, and so on.
    """
    if root is None:
        return []
    result: list[Any] = []
    forward: list[TreeNode] = [root]
    backward: list[TreeNode] = []
    while forward or backward:
        while forward:
            node = forward.pop()
            result.append(node.value)
            backward.extend(child for child in (node.left, node.right) if child is not None)
        while backward:
            node = backward.pop()
            result.append(node.value)
            forward.extend(child for child in (node.right, node.left) if child is not None)
    return result


def spiral_order_recursive(root: TreeNode | None) -> list[Any]:
    """Return the spiral order, visiting the tree once per level."""
    result: list[Any] = []
    for depth in range(height(root)):
        _collect_level(root, depth, result, right_first=bool(depth % 2))
    return result


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between two nodes, in one pass."""

    def measure(node: TreeNode | None) -> tuple[int, int]:
        if node is None:
            return 0, 0
        left_height, left_best = measure(node.left)
        right_height, right_best = measure(node.right)
        through = left_height + right_height + 1
        return max(left_height, right_height) + 1, max(through, left_best, right_best)

    return measure(root)[1]


def diameter_naive(root: TreeNode | None) -> int:
    """Return the diameter by computing subtree heights afresh at every node."""
    best = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        best = max(best, height(node.left) + height(node.right) + 1)
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return best