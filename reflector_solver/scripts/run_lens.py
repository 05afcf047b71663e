"""Entrypoint for the lens library initialization sequence."""

from __future__ import annotations

import argparse
import sys

from reflector_solver.src.data.platform_loader import read_steps_text
from reflector_solver.src.lens import LensBoxes, StepParseError, hash_sum, parse_steps
from reflector_solver.src.utils import config_loader
from reflector_solver.src.utils.logger import get_logger

logger = get_logger(__name__, config_loader.LOG_FILE)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Read an initialization sequence from stdin and print its result"
    )
    parser.add_argument(
        "--focusing-power",
        action="store_true",
        help="Run the lens boxes and print their focusing power instead of the hash sum",
    )
    args = parser.parse_args(argv)

    steps = parse_steps(read_steps_text(sys.stdin))
    if not args.focusing_power:
        print(hash_sum(steps))
        return

    try:
        boxes = LensBoxes(config_loader.BOX_COUNT).run(steps)
    except StepParseError as exc:
        logger.error("Failed to run initialization sequence: %s", exc)
        sys.exit(1)
    print(boxes.focusing_power())


if __name__ == "__main__":
    main()
