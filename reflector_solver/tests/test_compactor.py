import numpy as np
import pytest

from reflector_solver.src.core.grid import Grid
from reflector_solver.src.core.grid_utils import obstacle_positions
from reflector_solver.src.executor.compactor import (
    Direction,
    compact,
    compact_line,
    spin_cycle,
    tilt_east,
    tilt_north,
    tilt_south,
    tilt_west,
)


def _grid(text: str) -> Grid:
    return Grid.from_lines(text.strip().splitlines())


def _random_grid(seed: int, shape=(10, 10)) -> Grid:
    rng = np.random.default_rng(seed)
    cells = rng.choice(list(".O#"), size=shape)
    return Grid(cells.tolist())


EXAMPLE = """
O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
"""


def test_tilt_north():
    grid = _grid(
        """
.#...
.OO#.
.....
.O...
...O.
"""
    )
    tilt_north(grid)
    assert grid.to_text() == ".#O..\n.O.#.\n.O.O.\n.....\n....."


def test_tilt_south():
    grid = _grid(
        """
.#...
.OOO.
.....
.O#..
.#...
"""
    )
    tilt_south(grid)
    assert grid.to_text() == ".#...\n.....\n.OO..\n.O#..\n.#.O."


def test_tilt_west():
    grid = _grid(
        """
.#O..
.#.O.
.....
.O#..
.#...
"""
    )
    tilt_west(grid)
    assert grid.to_text() == ".#O..\n.#O..\n.....\nO.#..\n.#..."


def test_tilt_east():
    grid = _grid(
        """
.#O..
.#.O.
.....
.O#..
.#...
"""
    )
    tilt_east(grid)
    assert grid.to_text() == ".#..O\n.#..O\n.....\n.O#..\n.#..."


def test_compact_line_against_obstacle():
    cells = list("..O#.O.O")
    compact_line(cells, range(len(cells)), -1)
    assert "".join(cells) == "..O#..OO"


def test_compact_line_empty_order():
    cells = list("O")
    compact_line(cells, [], 1)
    assert cells == ["O"]


def test_direction_scan_orders():
    assert list(Direction.NORTH.scan_order(3)) == [2, 1, 0]
    assert list(Direction.SOUTH.scan_order(3)) == [0, 1, 2]
    assert Direction.WEST.offset == 1 and not Direction.WEST.vertical
    assert Direction.EAST.offset == -1 and not Direction.EAST.descending


def test_no_obstacles_packs_to_edge():
    grid = _grid(
        """
...
O.O
.O.
"""
    )
    tilt_south(grid)
    assert grid.to_text() == "...\n...\nOOO"
    tilt_east(grid)
    assert grid.to_text() == "...\n...\nOOO"
    tilt_north(grid)
    tilt_west(grid)
    assert grid.to_text() == "OOO\n...\n..."


def test_no_markers_unchanged():
    grid = _grid("#..\n.#.\n..#")
    before = grid.to_list()
    for direction in Direction:
        compact(grid, direction)
    assert grid.data == before


@pytest.mark.parametrize("direction", list(Direction))
def test_single_row_and_column(direction):
    row = _grid(".O#O.")
    compact(row, direction)
    assert row.count_markers() == 2
    column = Grid([["O"], ["."], ["#"], ["."], ["O"]])
    compact(column, direction)
    assert column.count_markers() == 2


def test_single_row_horizontal():
    row = _grid("..O#.O.")
    tilt_west(row)
    assert row.to_text() == "O..#O.."
    tilt_east(row)
    assert row.to_text() == "..O#..O"


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("direction", list(Direction))
def test_conservation_and_idempotence(seed, direction):
    grid = _random_grid(seed, shape=(7, 9))
    markers = grid.count_markers()
    obstacles = obstacle_positions(grid)

    compact(grid, direction)
    once = grid.to_list()
    assert grid.count_markers() == markers
    assert obstacle_positions(grid) == obstacles
    assert grid.shape() == (7, 9)

    compact(grid, direction)
    assert grid.data == once


def test_spin_cycle_example():
    grid = _grid(EXAMPLE)
    spin_cycle(grid)
    assert grid.to_text() == (
        ".....#....\n"
        "....#...O#\n"
        "...OO##...\n"
        ".OO#......\n"
        ".....OOO#.\n"
        ".O#...O#.#\n"
        "....O#....\n"
        "......OOOO\n"
        "#...O###..\n"
        "#..OO#...."
    )
    spin_cycle(grid)
    spin_cycle(grid)
    assert grid.to_text() == (
        ".....#....\n"
        "....#...O#\n"
        ".....##...\n"
        "..O#......\n"
        ".....OOO#.\n"
        ".O#...O#.#\n"
        "....O#...O\n"
        ".......OOO\n"
        "#...O###.O\n"
        "#.OOO#...O"
    )
