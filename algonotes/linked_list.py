"""Singly linked lists and multilevel (right/down) linked lists."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = None


@dataclass(eq=False)
class MultiNode:
    """A node with a ``right`` link to the next column and a ``down`` link within its column."""

    value: Any
    right: Optional["MultiNode"] = None
    down: Optional["MultiNode"] = None


def from_iterable(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: ListNode | None) -> list[Any]:
    """Return the values of a linked list in order."""
    values: list[Any] = []
    node = head
    while node is not None:
        values.append(node.value)
        node = node.next
    return values


def reverse_iterative(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place by relinking and return the new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        node.next, previous, node = previous, node, node.next
    return previous


def reverse_recursive(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place recursively and return the new head."""
    if head is None or head.next is None:
        return head
    rest = reverse_recursive(head.next)
    head.next.next = head
    head.next = None
    return rest


def _check_group_size(k: int) -> None:
    if k < 1:
        raise ValueError("group size must be positive")


def _reverse_group(head: ListNode, k: int) -> tuple[ListNode, ListNode | None]:
    """Reverse up to ``k`` nodes from ``head``; return the group's new head and the rest."""
    previous: ListNode | None = None
    node: ListNode | None = head
    count = 0
    while node is not None and count < k:
        node.next, previous, node = previous, node, node.next
        count += 1
    assert previous is not None
    return previous, node


def reverse_in_groups(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every run of ``k`` nodes, recursively, and return the new head.

    A shorter final run is reversed as well.
    """
    _check_group_size(k)
    if head is None:
        return None
    new_head, rest = _reverse_group(head, k)
    if rest is not None:
        head.next = reverse_in_groups(rest, k)
    return new_head


def reverse_in_groups_iterative(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse every run of ``k`` nodes in a single pass and return the new head."""
    _check_group_size(k)
    result: ListNode | None = None
    previous_tail: ListNode | None = None
    node = head
    while node is not None:
        group_tail = node
        group_head, node = _reverse_group(node, k)
        if previous_tail is None:
            result = group_head
        else:
            previous_tail.next = group_head
        group_tail.next = node
        previous_tail = group_tail
    return result


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted linked lists by relinking and return the merged head.

    On equal values, nodes from ``first`` come before those from ``second``.
    """
    anchor = ListNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.next, first = first, first.next
        else:
            tail.next, second = second, second.next
        tail = tail.next
    tail.next = first if first is not None else second
    return anchor.next


def build_multilevel(columns: Iterable[Iterable[Any]]) -> MultiNode | None:
    """Build a multilevel list: each column is linked by ``down``, column heads by ``right``."""
    root: MultiNode | None = None
    last_head: MultiNode | None = None
    for column in columns:
        column_head: MultiNode | None = None
        below: MultiNode | None = None
        for value in column:
            node = MultiNode(value)
            if below is None:
                column_head = node
            else:
                below.down = node
            below = node
        if column_head is None:
            raise ValueError("columns must not be empty")
        if last_head is None:
            root = column_head
        else:
            last_head.right = column_head
        last_head = column_head
    return root


def down_values(root: MultiNode | None) -> list[Any]:
    """Return the values reached by following ``down`` links from ``root``."""
    values: list[Any] = []
    node = root
    while node is not None:
        values.append(node.value)
        node = node.down
    return values


def _merge_down(first: MultiNode | None, second: MultiNode | None) -> MultiNode | None:
    anchor = MultiNode(None)
    tail = anchor
    while first is not None and second is not None:
        if first.value <= second.value:
            tail.down, first = first, first.down
        else:
            tail.down, second = second, second.down
        tail = tail.down
    tail.down = first if first is not None else second
    return anchor.down


def flatten_recursive(root: MultiNode | None) -> MultiNode | None:
    """Merge all sorted columns into one sorted ``down`` list, recursing over columns.

    The ``right`` links of the column heads are cleared.
    """
    if root is None or root.right is None:
        return root
    rest = flatten_recursive(root.right)
    root.right = None
    return _merge_down(root, rest)


def flatten_iterative(root: MultiNode | None) -> MultiNode | None:
    """Merge all sorted columns into one sorted ``down`` list, column by column.

    The ``right`` links of the column heads are cleared.
    """
    if root is None:
        return None
    column = root.right
    root.right = None
    merged = root
    while column is not None:
        following = column.right
        column.right = None
        merged = _merge_down(merged, column)
        column = following
    return merged