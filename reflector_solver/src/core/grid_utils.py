"""Grid comparison and validation helpers."""

from __future__ import annotations

from typing import List, Tuple

from reflector_solver.src.core.grid import CELL_STATES, CUBE, Grid


def validate_grid(grid: Grid, expected_shape: Tuple[int, int] | None = None) -> bool:
    """Return ``True`` if ``grid`` is well formed and matches ``expected_shape``."""

    if not isinstance(grid, Grid):
        return False

    shape = grid.shape()
    if expected_shape and shape != expected_shape:
        return False

    h, w = shape
    if h == 0 or w == 0:
        return False

    for row in grid.data:
        if len(row) != w:
            return False
        if any(val not in CELL_STATES for val in row):
            return False
    return True


def obstacle_positions(grid: Grid) -> List[Tuple[int, int]]:
    """Return the coordinates of every fixed obstacle in row-major order."""
    return [
        (r, c)
        for r, row in enumerate(grid.data)
        for c, value in enumerate(row)
        if value == CUBE
    ]


def structural_diff(grid: Grid, other: Grid) -> List[Tuple[int, int]]:
    """Return coordinates where ``grid`` and ``other`` differ."""
    if grid.shape() != other.shape():
        raise ValueError(f"Shape mismatch: {grid.shape()} vs {other.shape()}")
    return [
        (r, c)
        for r, (row_a, row_b) in enumerate(zip(grid.data, other.data))
        for c, (a, b) in enumerate(zip(row_a, row_b))
        if a != b
    ]


__all__ = ["validate_grid", "obstacle_positions", "structural_diff"]
