"""Directional compaction of round markers on the platform grid."""

from __future__ import annotations

from enum import Enum
from typing import List, MutableSequence, Sequence

from reflector_solver.src.core.grid import CUBE, EMPTY, ROUND, Grid


class Direction(Enum):
    """Tilt direction as (vertical axis, descending scan, placement offset).

    Markers are packed toward the end of the line the scan finishes at: a
    descending scan with offset ``+1`` fills from index 0 upward.
    """

    NORTH = (True, True, 1)
    SOUTH = (True, False, -1)
    WEST = (False, True, 1)
    EAST = (False, False, -1)

    def __init__(self, vertical: bool, descending: bool, offset: int) -> None:
        self.vertical = vertical
        self.descending = descending
        self.offset = offset

    def scan_order(self, length: int) -> range:
        """Return the index sequence swept along a line of ``length`` cells."""
        if self.descending:
            return range(length - 1, -1, -1)
        return range(length)


SPIN_ORDER = (Direction.NORTH, Direction.WEST, Direction.SOUTH, Direction.EAST)


def compact_line(
    cells: MutableSequence[str], order: Sequence[int], offset: int
) -> None:
    """Slide the markers in ``cells`` in place.

    ``order`` is walked while counting markers since the last obstacle; each
    counted marker cell is cleared. An obstacle at index ``k`` receives the
    pending markers at ``k + offset``, ``k + 2 * offset`` and so on. Markers
    still pending at the end of ``order`` are placed from the last visited
    index onward.
    """

    pending = 0
    last = None
    for idx in order:
        value = cells[idx]
        if value == ROUND:
            pending += 1
            cells[idx] = EMPTY
        elif value == CUBE:
            pos = idx + offset
            for _ in range(pending):
                cells[pos] = ROUND
                pos += offset
            pending = 0
        last = idx

    if last is None:
        return
    pos = last
    for _ in range(pending):
        cells[pos] = ROUND
        pos += offset


def compact(grid: Grid, direction: Direction) -> None:
    """Tilt ``grid`` in place so every marker rolls toward ``direction``."""
    h, w = grid.shape()
    data = grid.data
    if direction.vertical:
        order = direction.scan_order(h)
        for col in range(w):
            line: List[str] = [data[row][col] for row in range(h)]
            compact_line(line, order, direction.offset)
            for row in range(h):
                data[row][col] = line[row]
    else:
        order = direction.scan_order(w)
        for row in data:
            compact_line(row, order, direction.offset)


def tilt_north(grid: Grid) -> None:
    compact(grid, Direction.NORTH)


def tilt_south(grid: Grid) -> None:
    compact(grid, Direction.SOUTH)


def tilt_west(grid: Grid) -> None:
    compact(grid, Direction.WEST)


def tilt_east(grid: Grid) -> None:
    compact(grid, Direction.EAST)


def spin_cycle(grid: Grid) -> None:
    """Apply one North, West, South, East compaction pass in place."""
    for direction in SPIN_ORDER:
        compact(grid, direction)


__all__ = [
    "Direction",
    "SPIN_ORDER",
    "compact_line",
    "compact",
    "tilt_north",
    "tilt_south",
    "tilt_west",
    "tilt_east",
    "spin_cycle",
]
