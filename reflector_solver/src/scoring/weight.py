"""Load scoring for marker positions on the platform."""

from __future__ import annotations

import numpy as np

from reflector_solver.src.core.grid import ROUND, Grid


def compute_weight(grid: Grid) -> int:
    """Return the sum of ``rows - row_index`` over all round markers."""
    arr = grid.to_array()
    rows, _ = np.nonzero(arr == ROUND)
    return int((arr.shape[0] - rows).sum())


def row_loads(grid: Grid) -> np.ndarray:
    """Return the load contributed by each row, top row first."""
    arr = grid.to_array()
    counts = (arr == ROUND).sum(axis=1)
    return counts * np.arange(arr.shape[0], 0, -1)


__all__ = ["compute_weight", "row_loads"]
