"""Breadth- and depth-first searches over rectangular grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterator, Sequence
from typing import Any

Cell = tuple[int, int]


def _shape(grid: Sequence[Sequence[Any]]) -> tuple[int, int]:
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return len(grid), cols


def _neighbours(row: int, col: int, rows: int, cols: int) -> Iterator[Cell]:
    for dr, dc in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def _spread(
    starts: Sequence[Cell], rows: int, cols: int, is_open: Callable[[int, int], bool]
) -> set[Cell]:
    """Cells reachable from ``starts`` through 4-neighbouring open cells."""
    seen = set(starts)
    queue = deque(starts)
    while queue:
        row, col = queue.popleft()
        for cell in _neighbours(row, col, rows, cols):
            if cell not in seen and is_open(*cell):
                seen.add(cell)
                queue.append(cell)
    return seen


def _border(rows: int, cols: int) -> Iterator[Cell]:
    for row in range(rows):
        for col in range(cols):
            if row in (0, rows - 1) or col in (0, cols - 1):
                yield row, col


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Distance from each cell to the nearest 0 cell, moving between 4-neighbours.

    Without any 0 cell nothing is reached and every distance is left at 0.
    """
    rows, cols = _shape(mat)
    distance = [[0] * cols for _ in range(rows)]
    queue = deque((r, c) for r in range(rows) for c in range(cols) if mat[r][c] == 0)
    seen = set(queue)
    while queue:
        row, col = queue.popleft()
        for r, c in _neighbours(row, col, rows, cols):
            if (r, c) not in seen:
                seen.add((r, c))
                distance[r][c] = distance[row][col] + 1
                queue.append((r, c))
    return distance


def flood_fill(
    image: Sequence[Sequence[int]], row: int, col: int, color: int
) -> list[list[int]]:
    """A copy of ``image`` with the region of like-coloured cells around
    ``(row, col)`` painted ``color``."""
    rows, cols = _shape(image)
    if not (0 <= row < rows and 0 <= col < cols):
        raise IndexError(f"cell ({row}, {col}) is outside the image")
    original = image[row][col]
    region = _spread([(row, col)], rows, cols, lambda r, c: image[r][c] == original)
    painted = [list(line) for line in image]
    for r, c in region:
        painted[r][c] = color
    return painted


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (value 1) from which the grid's edge cannot be
    reached through land."""
    rows, cols = _shape(grid)
    starts = [(r, c) for r, c in _border(rows, cols) if grid[r][c] == 1]
    escaped = _spread(starts, rows, cols, lambda r, c: grid[r][c] == 1)
    return sum(
        1
        for r in range(rows)
        for c in range(cols)
        if grid[r][c] == 1 and (r, c) not in escaped
    )


def capture_surrounded(board: Sequence[Sequence[str]]) -> list[list[str]]:
    """A copy of ``board`` with every ``'O'`` region not touching the edge turned to ``'X'``."""
    rows, cols = _shape(board)
    starts = [(r, c) for r, c in _border(rows, cols) if board[r][c] == "O"]
    safe = _spread(starts, rows, cols, lambda r, c: board[r][c] == "O")
    return [
        ["X" if cell == "O" and (r, c) not in safe else cell for c, cell in enumerate(line)]
        for r, line in enumerate(board)
    ]