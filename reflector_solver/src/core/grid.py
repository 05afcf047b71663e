"""Grid data structure for the tilting platform."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

import numpy as np

EMPTY = "."
ROUND = "O"
CUBE = "#"
CELL_STATES = frozenset({EMPTY, ROUND, CUBE})


class GridParseError(ValueError):
    """Raised when platform input cannot be turned into a rectangular grid."""


@dataclass
class Grid:
    """2D grid of single-character cells (``.`` empty, ``O`` round, ``#`` cube)."""

    data: List[List[str]]

    def __post_init__(self) -> None:
        if not self.data or not self.data[0]:
            raise GridParseError("Grid cannot be empty")
        row_len = len(self.data[0])
        for idx, row in enumerate(self.data):
            if len(row) != row_len:
                raise GridParseError(
                    f"Row {idx} has length {len(row)}, expected {row_len}"
                )
            for col, value in enumerate(row):
                if value not in CELL_STATES:
                    raise GridParseError(
                        f"Invalid cell {value!r} at ({idx}, {col})"
                    )

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Grid":
        """Build a grid from text rows, ignoring trailing newlines."""
        return cls([list(line.rstrip("\r\n")) for line in lines])

    def get(self, row: int, col: int) -> str:
        return self.data[row][col]

    def set(self, row: int, col: int, value: str) -> None:
        """Set the cell at ``row``, ``col``."""
        self.data[row][col] = value

    def shape(self) -> Tuple[int, int]:
        """Return the grid shape as (height, width)."""
        return len(self.data), len(self.data[0])

    def count_cells(self) -> Dict[str, int]:
        """Return a mapping from cell state to number of occurrences."""
        counts: Dict[str, int] = {}
        for row in self.data:
            for value in row:
                counts[value] = counts.get(value, 0) + 1
        return counts

    def count_markers(self) -> int:
        return sum(row.count(ROUND) for row in self.data)

    def copy(self) -> "Grid":
        return Grid(self.to_list())

    def to_list(self) -> List[List[str]]:
        """Return a deep list copy of the grid data."""
        return [row[:] for row in self.data]

    def to_array(self) -> np.ndarray:
        """Return the cells as a 2D numpy array of single characters."""
        return np.array(self.data, dtype="<U1")

    def serialize(self) -> str:
        """Return all cells concatenated row by row."""
        return "".join("".join(row) for row in self.data)

    def to_text(self) -> str:
        return "\n".join("".join(row) for row in self.data)

    def fingerprint(self) -> int:
        """Return a 64-bit digest of the full grid contents.

        Distinct grids may share a fingerprint; callers that need certainty
        must compare :meth:`serialize` output as well.
        """
        digest = hashlib.blake2b(self.serialize().encode("ascii"), digest_size=8)
        return int.from_bytes(digest.digest(), "big")

    def visualize(self) -> None:
        """Pretty-print the grid."""
        print(self.to_text())

    def __repr__(self) -> str:
        return f"Grid(shape={self.shape()})"
