"""Dynamic programming over grids and triangles."""

from __future__ import annotations

from collections.abc import Sequence


def unique_paths(rows: int, cols: int) -> int:
    """Number of right/down paths from the top-left to the bottom-right cell."""
    if rows < 1 or cols < 1:
        raise ValueError("rows and cols must be at least 1")
    counts = [1] * cols
    for _ in range(1, rows):
        for j in range(1, cols):
            counts[j] += counts[j - 1]
    return counts[-1]


def _require_grid(grid: Sequence[Sequence[int]]) -> int:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("grid rows must all have the same length")
    return width


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Right/down paths from the top-left to the bottom-right cell avoiding
    cells marked with a true value."""
    width = _require_grid(grid)
    counts = [0] * width
    for i, row in enumerate(grid):
        for j, blocked in enumerate(row):
            if blocked:
                counts[j] = 0
            elif i == 0 and j == 0:
                counts[j] = 1
            elif j:
                counts[j] += counts[j - 1]
    return counts[-1]


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a right/down path from the top-left to the bottom-right cell."""
    _require_grid(grid)
    best: list[int] = []
    for i, row in enumerate(grid):
        if i == 0:
            running = 0
            best = []
            for value in row:
                running += value
                best.append(running)
            continue
        best[0] += row[0]
        for j in range(1, len(row)):
            best[j] = min(best[j], best[j - 1]) + row[j]
    return best[-1]


def minimum_total(triangle: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a top-to-bottom path, each step going to one of the two
    entries below."""
    if not triangle:
        raise ValueError("triangle must not be empty")
    best: list[int] = []
    for depth, row in enumerate(triangle):
        if len(row) != depth + 1:
            raise ValueError("row %d must have %d entries" % (depth, depth + 1))
        if depth == 0:
            best = [row[0]]
            continue
        best = [
            value
            + min(best[k] for k in (j - 1, j) if 0 <= k < depth)
            for j, value in enumerate(row)
        ]
    return min(best)


def min_falling_path_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Smallest sum of a path from the top row to the bottom row moving down,
    down-left or down-right."""
    width = _require_grid(matrix)
    best = list(matrix[0])
    for row in matrix[1:]:
        best = [
            value + min(best[max(j - 1, 0) : min(j + 2, width)])
            for j, value in enumerate(row)
        ]
    return min(best)