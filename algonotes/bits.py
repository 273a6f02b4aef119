"""Bit manipulation routines on integers."""

from __future__ import annotations

from collections.abc import Sequence
from functools import reduce
from operator import xor

_UINT32_MASK = (1 << 32) - 1


def _mask(width: int) -> int:
    if width < 1:
        raise ValueError("width must be positive")
    return (1 << width) - 1


def _is_negative(x: int) -> bool:
    """Return the sign bit of ``x`` without a comparison operator."""
    return bool((x >> x.bit_length()) & 1)


def _require_non_negative(*numbers: int) -> None:
    if any(number < 0 for number in numbers):
        raise ValueError("numbers must not be negative")


def reverse_bits(n: int, width: int = 32) -> int:
    """Return the lowest ``width`` bits of ``n`` in reverse order, as an unsigned value."""
    mask = _mask(width)
    n &= mask
    rev = 0
    for position in range(width):
        if n & (1 << position):
            rev |= 1 << (width - 1 - position)
    return rev


def reverse_bits_shifting(n: int, width: int = 32) -> int:
    """Reverse the lowest ``width`` bits of ``n`` by shifting them out one at a time."""
    mask = _mask(width)
    n &= mask
    rev = n
    remaining = width
    while n:
        rev = (rev << 1) | (n & 1)
        n >>= 1
        remaining -= 1
    return (rev << remaining) & mask


def greater_by_counting(a: int, b: int) -> int:
    """Return the greater of two non-negative numbers by counting both down."""
    _require_non_negative(a, b)
    x, y = a, b
    while x and y:
        x -= 1
        y -= 1
    return b if not x else a


def greater_by_sign(a: int, b: int) -> int:
    """Return the greater of two numbers from the sign of their difference."""
    return b if _is_negative(a - b) else a


def greater_by_division(a: int, b: int) -> int:
    """Return the greater of two positive numbers from their truncated quotient."""
    return b if not abs(a) // abs(b) else a


def smallest_by_counting(a: int, b: int, c: int) -> int:
    """Return the smallest of three non-negative numbers by counting them down."""
    _require_non_negative(a, b, c)
    x, y, z = a, b, c
    while x and y and z:
        x -= 1
        y -= 1
        z -= 1
    if not x:
        return a
    if not y:
        return b
    return c


def smallest_by_sign(a: int, b: int, c: int) -> int:
    """Return the smallest of three numbers from the signs of their differences."""
    if _is_negative(a - b):
        return a if _is_negative(a - c) else c
    return b if _is_negative(b - c) else c


def smallest_by_division(a: int, b: int, c: int) -> int:
    """Return the smallest of three positive numbers from truncated quotients."""
    if not abs(a) // abs(b):
        return a if not abs(a) // abs(c) else c
    return b if not abs(b) // abs(c) else c


def rightmost_different_bit(a: int, b: int) -> int:
    """Return the one-based position of the lowest bit in which ``a`` and ``b`` differ."""
    if a == b:
        raise ValueError("numbers are equal, no bit differs")
    diff = a ^ b
    return (diff & -diff).bit_length()


def rightmost_different_bit_by_shift(a: int, b: int) -> int:
    """Find the lowest differing bit position by shifting both numbers right."""
    if a == b:
        raise ValueError("numbers are equal, no bit differs")
    position = 1
    while (a & 1) == (b & 1):
        a >>= 1
        b >>= 1
        position += 1
    return position


def rightmost_set_bit(n: int) -> int:
    """Return the one-based position of the lowest set bit of ``n``."""
    if n == 0:
        raise ValueError("zero has no set bit")
    return (n & -n).bit_length()


def rightmost_set_bit_by_shift(n: int) -> int:
    """Find the lowest set bit position by shifting ``n`` right."""
    if n == 0:
        raise ValueError("zero has no set bit")
    position = 1
    while not n & 1:
        n >>= 1
        position += 1
    return position


def all_bits_set(n: int) -> bool:
    """Return True if ``n + 1`` shares no bit with ``n``, i.e. ``n`` is all ones."""
    return not ((n + 1) & n)


def all_bits_set_by_count(n: int) -> bool:
    """Return True if the count of set bits of a positive ``n`` equals its width."""
    if n < 1:
        raise ValueError("number must be positive")
    return bin(n).count("1") == n.bit_length()


def xor_of_subarray_xors(values: Sequence[int]) -> int:
    """Return the XOR of the XORs of every contiguous subarray."""
    n = len(values)
    return reduce(
        xor,
        (value for i, value in enumerate(values) if ((i + 1) * (n - i)) % 2),
        0,
    )


def is_bit_rotation(x: int, y: int) -> bool:
    """Return True if the 32-bit unsigned ``y`` is a bit rotation of ``x``."""
    for number in (x, y):
        if not 0 <= number <= _UINT32_MASK:
            raise ValueError("numbers must fit in 32 unsigned bits")
    doubled = x | (x << 32)
    while doubled >= y:
        if y == doubled & _UINT32_MASK:
            return True
        doubled >>= 1
    return False


def nth_magic_number(n: int) -> int:
    """Return the n-th number that is a sum of distinct positive powers of five."""
    if n < 0:
        raise ValueError("n must not be negative")
    power = 1
    result = 0
    while n:
        power *= 5
        if n & 1:
            result += power
        n >>= 1
    return result