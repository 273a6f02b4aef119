"""String rotation check."""

from __future__ import annotations


def are_rotations(first: str, second: str) -> bool:
    """Return True if ``second`` occurs in ``first`` written twice in a row."""
    return second in first + first