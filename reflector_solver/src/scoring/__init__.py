"""Scoring utilities for platform states."""

from .weight import compute_weight, row_loads

__all__ = ["compute_weight", "row_loads"]
