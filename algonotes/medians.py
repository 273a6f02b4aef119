"""Medians of one sorted sequence and of two sorted sequences combined."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import islice


def median(values: Sequence[float]) -> float:
    """Return the median of a sorted sequence."""
    n = len(values)
    if n == 0:
        raise ValueError("median of an empty sequence")
    if n % 2 == 0:
        return (values[n // 2] + values[n // 2 - 1]) / 2
    return values[n // 2]


def median_of_three(a: float, b: float, c: float) -> float:
    """Return the middle one of three values."""
    return sorted((a, b, c))[1]


def median_of_four(a: float, b: float, c: float, d: float) -> float:
    """Return the mean of the two middle values of four."""
    ordered = sorted((a, b, c, d))
    return (ordered[1] + ordered[2]) / 2


def _median_small_first(a: Sequence[float], b: Sequence[float]) -> float:
    """Median of two sorted sequences where ``a`` is not longer than ``b``."""
    while True:
        n, m = len(a), len(b)
        if n == 0:
            return median(b)
        if n == 1:
            if m == 1:
                return (a[0] + b[0]) / 2
            if m % 2:
                middle = median_of_three(b[m // 2 - 1], a[0], b[m // 2 + 1])
                return (b[m // 2] + middle) / 2
            return median_of_three(b[m // 2], b[m // 2 - 1], a[0])
        if n == 2:
            if m == 2:
                return median_of_four(a[0], a[1], b[0], b[1])
            if m % 2:
                return median_of_three(
                    b[m // 2], max(a[0], b[m // 2 - 1]), min(a[1], b[m // 2 + 1])
                )
            return median_of_four(
                b[m // 2],
                b[m // 2 - 1],
                max(a[0], b[m // 2 - 2]),
                min(a[1], b[m // 2 + 1]),
            )
        cut = (n - 1) // 2
        if a[cut] < b[(m - 1) // 2]:
            a, b = a[cut:], b[: m - cut]
        else:
            a, b = a[: n // 2 + 1], b[cut:]


def median_different_sizes(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the median of two sorted sequences of any sizes in logarithmic time."""
    if len(first) < len(second):
        return _median_small_first(list(first), list(second))
    return _median_small_first(list(second), list(first))


def median_by_merge(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the median of two sorted sequences by walking their merge."""
    total = len(first) + len(second)
    if total == 0:
        raise ValueError("median of two empty sequences")
    head = list(islice(heapq.merge(first, second), total // 2 + 1))
    if total % 2:
        return head[-1]
    return (head[-2] + head[-1]) / 2


def _require_equal_sizes(first: Sequence[float], second: Sequence[float]) -> None:
    if len(first) != len(second):
        raise ValueError("sequences must have equal sizes")
    if not first:
        raise ValueError("median of two empty sequences")


def median_equal_sizes(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the median of two sorted sequences of equal size by halving."""
    _require_equal_sizes(first, second)
    a, b = list(first), list(second)
    while True:
        n = len(a)
        if n == 1:
            return (a[0] + b[0]) / 2
        if n == 2:
            return (max(a[0], b[0]) + min(a[1], b[1])) / 2
        m1, m2 = median(a), median(b)
        if m1 == m2:
            return m1
        if n % 2 == 0:
            drop, keep = n // 2 - 1, n - (n // 2 - 1)
        else:
            drop, keep = n // 2, n // 2 + 1
        if m1 < m2:
            a, b = a[drop:], b[:keep]
        else:
            a, b = a[:keep], b[drop:]


def median_equal_sizes_by_merge(first: Sequence[float], second: Sequence[float]) -> float:
    """Return the median of two sorted sequences of equal size by merging."""
    _require_equal_sizes(first, second)
    return median_by_merge(first, second)