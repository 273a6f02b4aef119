"""Binary-search based queries over sorted, rotated and bitonic sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def _require_values(values: Sequence[int]) -> None:
    if not values:
        raise ValueError("sequence must not be empty")


def max_increasing_decreasing(values: Sequence[int]) -> int:
    """Return the maximum of a sequence that first increases and then decreases."""
    _require_values(values)
    lo, hi = 0, len(values) - 1
    while True:
        if lo == hi:
            return values[lo]
        if lo + 1 == hi:
            return max(values[lo], values[hi])
        mid = (lo + hi) // 2
        left, here, right = values[mid - 1], values[mid], values[mid + 1]
        if here > left and here > right:
            return here
        if left < here < right:
            lo = mid + 1
        else:
            hi = mid - 1


def find_peak(values: Sequence[int]) -> int:
    """Return a value that is not smaller than any of its neighbours."""
    _require_values(values)
    lo, hi = 0, len(values) - 1
    while True:
        if lo == hi:
            return values[lo]
        if lo + 1 == hi:
            return max(values[lo], values[hi])
        mid = (lo + hi) // 2
        here = values[mid]
        if here > values[mid - 1] and here > values[mid + 1]:
            return here
        if here < values[mid - 1]:
            hi = mid - 1
        else:
            lo = mid + 1


def find_min_rotated(values: Sequence[int]) -> int:
    """Return the smallest value of a sorted sequence rotated by some offset."""
    _require_values(values)
    lo, hi = 0, len(values) - 1
    while True:
        if lo == hi:
            return values[lo]
        if lo + 1 == hi:
            return min(values[lo], values[hi])
        mid = (lo + hi) // 2
        here = values[mid]
        if values[lo] <= values[mid - 1] and here <= values[mid - 1] and here <= values[hi]:
            return here
        if here <= values[hi]:
            hi = mid - 1
        else:
            lo = mid + 1


def search_rotated(values: Sequence[int], key: int) -> int | None:
    """Return the index of ``key`` in a sorted, rotated sequence, or None."""
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] == key:
            return mid
        if values[lo] <= values[mid]:
            if values[lo] <= key <= values[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif values[mid] <= key <= values[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


def first_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the first index of ``key`` in a sorted sequence, or None."""
    index = bisect_left(values, key)
    if index < len(values) and values[index] == key:
        return index
    return None


def last_occurrence(values: Sequence[int], key: int) -> int | None:
    """Return the last index of ``key`` in a sorted sequence, or None."""
    index = bisect_right(values, key) - 1
    if index >= 0 and values[index] == key:
        return index
    return None


def count_occurrences(values: Sequence[int], key: int) -> int:
    """Return how many times ``key`` occurs in a sorted sequence."""
    first = first_occurrence(values, key)
    last = last_occurrence(values, key)
    if first is None or last is None:
        return 0
    return last - first + 1