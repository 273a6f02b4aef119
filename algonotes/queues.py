"""Bounded FIFO queue and double-ended queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any


class QueueFull(Exception):
    """Raised when adding to a queue that is at capacity."""


class QueueEmpty(IndexError):
    """Raised when reading from or removing from an empty queue."""


class _Bounded:
    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Any] = deque()

    def _check_room(self) -> None:
        if len(self._items) == self.capacity:
            raise QueueFull("queue is full")

    def _check_items(self) -> None:
        if not self._items:
            raise QueueEmpty("queue is empty")

    def __len__(self) -> int:
        return len(self._items)


class CircularQueue(_Bounded):
    """A first-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def enqueue(self, item: Any) -> None:
        """Add an item at the rear."""
        self._check_room()
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        self._check_items()
        return self._items.popleft()

    def front(self) -> Any:
        """Return the item at the front."""
        self._check_items()
        return self._items[0]

    def rear(self) -> Any:
        """Return the item at the rear."""
        self._check_items()
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)


class CircularDeque(_Bounded):
    """A double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int) -> None:
        super().__init__(capacity)

    def insert_front(self, item: Any) -> None:
        """Add an item at the front."""
        self._check_room()
        self._items.appendleft(item)

    def insert_rear(self, item: Any) -> None:
        """Add an item at the rear."""
        self._check_room()
        self._items.append(item)

    def delete_front(self) -> Any:
        """Remove and return the item at the front."""
        self._check_items()
        return self._items.popleft()

    def delete_rear(self) -> Any:
        """Remove and return the item at the rear."""
        self._check_items()
        return self._items.pop()

    def front(self) -> Any:
        """Return the item at the front."""
        self._check_items()
        return self._items[0]

    def rear(self) -> Any:
        """Return the item at the rear."""
        self._check_items()
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)