"""Core grid utilities and data structures."""

from .grid import CUBE, EMPTY, ROUND, Grid, GridParseError
from .grid_utils import obstacle_positions, structural_diff, validate_grid

__all__ = [
    "Grid",
    "GridParseError",
    "EMPTY",
    "ROUND",
    "CUBE",
    "validate_grid",
    "obstacle_positions",
    "structural_diff",
]
