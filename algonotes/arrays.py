"""Array problems: distinct values, trades, differences, intervals and windows."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Interval:
    """A closed interval of integers from ``start`` to ``end``."""

    start: int
    end: int


def distinct(values: Iterable[int]) -> list[int]:
    """Return each value once, in the order of its first appearance."""
    return list(dict.fromkeys(values))


def stock_trades(prices: Sequence[int]) -> list[tuple[int, int]]:
    """Return (buy_day, sell_day) pairs, zero-based, that capture every rise.

    An empty list means no profit can be made.
    """
    trades: list[tuple[int, int]] = []
    n = len(prices)
    i = 1
    while i < n:
        while i < n and prices[i] < prices[i - 1]:
            i += 1
        if i == n:
            break
        buy = i - 1
        while i < n and prices[i] > prices[i - 1]:
            i += 1
        sell = i - 1
        if sell > buy:
            trades.append((buy, sell))
        i += 1
    return trades


def max_difference(values: Sequence[int]) -> int:
    """Return the largest ``values[j] - values[i]`` with ``j > i``.

    The result is never below -1, which stands for "no gain possible".
    """
    if not values:
        raise ValueError("sequence must not be empty")
    best = -1
    right_max = values[-1]
    for value in reversed(values[:-1]):
        best = max(best, right_max - value)
        right_max = max(right_max, value)
    return best


def merge_intervals(intervals: Iterable[Interval]) -> list[Interval]:
    """Merge overlapping or touching intervals, returned sorted by start."""
    ordered = sorted(intervals, key=lambda interval: interval.start)
    if not ordered:
        return []
    merged: list[Interval] = []
    current = ordered[0]
    for interval in ordered[1:]:
        if current.end < interval.start:
            merged.append(current)
            current = interval
        elif current.end < interval.end:
            current = Interval(current.start, interval.end)
    merged.append(current)
    return merged


def sliding_window_max(values: Sequence[int], k: int) -> list[int]:
    """Return the maximum of every contiguous window of size ``k``."""
    if k < 1:
        raise ValueError("window size must be positive")
    if k > len(values):
        raise ValueError("window size must not exceed the sequence length")
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and values[window[-1]] <= value:
            window.pop()
        window.append(i)
        if i >= k - 1:
            result.append(values[window[0]])
    return result