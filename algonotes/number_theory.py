"""Divisibility questions answered with the greatest common divisor."""

from __future__ import annotations

import math
from collections.abc import Iterable


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    return math.gcd(a, b)


def _step_gcd(a: int, b: int) -> int:
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("coefficients must not both be zero")
    return divisor


def is_solvable(a: int, b: int, c: int) -> bool:
    """Return True if ``a*x + b*y = c`` has an integer solution."""
    return c % _step_gcd(a, b) == 0


def derivables(values: Iterable[int], d: int, a: int, b: int) -> list[int]:
    """Return the values that ``d`` can reach by adding or subtracting ``a`` and ``b``."""
    divisor = _step_gcd(a, b)
    return [value for value in values if abs(value - d) % divisor == 0]


def reachable(values: Iterable[int], k: int, d1: int, d2: int) -> list[bool]:
    """For each value, tell whether it is reachable from ``k`` by jumps of ``d1`` or ``d2``."""
    divisor = _step_gcd(d1, d2)
    return [abs(value - k) % divisor == 0 for value in values]