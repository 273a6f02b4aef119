"""Knapsack variants and the house robber problem."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Item:
    """An item with a value and a positive weight."""

    value: float
    weight: float

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("item weight must be positive")

    @property
    def ratio(self) -> float:
        """Value per unit of weight."""
        return self.value / self.weight


def _check_knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have equal lengths")
    if capacity < 0:
        raise ValueError("capacity must not be negative")


def knapsack_recursive(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best 0/1 knapsack value by plain recursion."""
    _check_knapsack(capacity, weights, values)

    def best(room: int, n: int) -> int:
        if room == 0 or n == 0:
            return 0
        weight, value = weights[n - 1], values[n - 1]
        skip = best(room, n - 1)
        if weight > room:
            return skip
        return max(skip, value + best(room - weight, n - 1))

    return best(capacity, len(weights))


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best 0/1 knapsack value with a dynamic-programming table."""
    _check_knapsack(capacity, weights, values)
    previous = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        current = [
            max(previous[w], value + previous[w - weight]) if weight <= w else previous[w]
            for w in range(capacity + 1)
        ]
        current[0] = 0
        previous = current
    return previous[capacity]


def max_stolen(houses: Sequence[int]) -> int:
    """Return the largest sum of values taken from no two adjacent houses."""
    if not houses:
        return 0
    if len(houses) == 1:
        return houses[0]
    before, best = houses[0], max(houses[0], houses[1])
    for value in houses[2:]:
        before, best = best, max(value + before, best)
    return best


def fractional_knapsack(items: Iterable[Item], capacity: float) -> float:
    """Return the best value when items may be taken in fractions."""
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    total = 0.0
    room = capacity
    for item in sorted(items, key=lambda item: item.ratio, reverse=True):
        if room <= 0:
            break
        if item.weight <= room:
            room -= item.weight
            total += item.value
        else:
            total += item.ratio * room
            room = 0
    return total