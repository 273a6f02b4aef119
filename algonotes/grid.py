"""Region and traversal questions on rectangular grids."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_NEIGHBOURS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def _check_rectangular(grid: Sequence[Sequence[Any]]) -> None:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must all have the same length")


def _region_sizes(grid: Sequence[Sequence[Any]]) -> list[int]:
    """Sizes of the 8-connected regions of truthy cells, in scan order."""
    _check_rectangular(grid)
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    seen: set[tuple[int, int]] = set()
    sizes: list[int] = []
    for r in range(rows):
        for c in range(cols):
            if not grid[r][c] or (r, c) in seen:
                continue
            seen.add((r, c))
            stack = [(r, c)]
            size = 0
            while stack:
                i, j = stack.pop()
                size += 1
                for di, dj in _NEIGHBOURS:
                    ni, nj = i + di, j + dj
                    if 0 <= ni < rows and 0 <= nj < cols and grid[ni][nj] and (ni, nj) not in seen:
                        seen.add((ni, nj))
                        stack.append((ni, nj))
            sizes.append(size)
    return sizes


def largest_region(grid: Sequence[Sequence[Any]]) -> int:
    """Return the cell count of the largest 8-connected region of truthy cells."""
    return max(_region_sizes(grid), default=0)


def count_islands(grid: Sequence[Sequence[Any]]) -> int:
    """Return the number of 8-connected regions of truthy cells."""
    return len(_region_sizes(grid))


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Return the matrix elements in clockwise spiral order from the top-left."""
    _check_rectangular(matrix)
    result: list[Any] = []
    top, bottom = 0, len(matrix)
    left, right = 0, len(matrix[0]) if matrix else 0
    while top < bottom and left < right:
        result.extend(matrix[top][left:right])
        top += 1
        result.extend(matrix[i][right - 1] for i in range(top, bottom))
        right -= 1
        if top < bottom:
            result.extend(matrix[bottom - 1][i] for i in range(right - 1, left - 1, -1))
            bottom -= 1
        if left < right:
            result.extend(matrix[i][left] for i in range(bottom - 1, top - 1, -1))
            left += 1
    return result