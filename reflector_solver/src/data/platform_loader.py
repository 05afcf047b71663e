"""Input loading for the platform grid and the lens step sequence."""

from __future__ import annotations

from pathlib import Path
from typing import IO, List

from reflector_solver.src.core.grid import Grid


def read_grid(stream: IO[str]) -> Grid:
    """Read newline-delimited rows from ``stream`` into a :class:`Grid`.

    Trailing blank lines are dropped, so a final newline does not produce an
    empty row. A blank line inside the grid is kept as a zero-length row.
    Dimensions are inferred from the rows; ragged or otherwise malformed
    input raises :class:`~reflector_solver.src.core.grid.GridParseError`.
    """

    lines = [line.rstrip("\r\n") for line in stream]
    while lines and not lines[-1]:
        lines.pop()
    return Grid.from_lines(lines)


def load_grid(path: str | Path) -> Grid:
    """Load a platform grid from ``path``."""
    with open(Path(path), "r", encoding="utf-8") as f:
        return read_grid(f)


def read_steps_text(stream: IO[str]) -> str:
    """Return the raw lens step text; line breaks separate steps like commas."""
    return stream.read()


def load_steps_text(path: str | Path) -> str:
    with open(Path(path), "r", encoding="utf-8") as f:
        return read_steps_text(f)


__all__: List[str] = ["read_grid", "load_grid", "read_steps_text", "load_steps_text"]
