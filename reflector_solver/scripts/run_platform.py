"""Entrypoint for the tilting platform simulation."""

from __future__ import annotations

import argparse
import sys

from reflector_solver.src.core.grid import GridParseError
from reflector_solver.src.data.platform_loader import read_grid
from reflector_solver.src.executor.simulator import north_load, simulate_platform
from reflector_solver.src.utils import config_loader
from reflector_solver.src.utils.logger import get_logger

logger = get_logger(__name__, config_loader.LOG_FILE)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Read a platform grid from stdin and print its final load"
    )
    parser.add_argument(
        "--north-only",
        action="store_true",
        help="Print the load after a single north tilt instead of spinning",
    )
    args = parser.parse_args(argv)

    try:
        grid = read_grid(sys.stdin)
    except GridParseError as exc:
        logger.error("Failed to parse platform: %s", exc)
        sys.exit(1)

    if args.north_only:
        print(north_load(grid))
        return

    result = simulate_platform(grid)
    print(result.weight)


if __name__ == "__main__":
    main()
