"""Boxes of labeled lenses driven by the initialization sequence."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from reflector_solver.src.lens.hashing import holiday_hash
from reflector_solver.src.utils.logger import get_logger

logger = get_logger(__name__)

_STEP_RE = re.compile(
    r"^(?P<label>[a-zA-Z]+)(?:(?P<insert>=)(?P<focal>[1-9])|(?P<remove>-))$"
)


class StepParseError(ValueError):
    """Raised for steps that are neither ``label=N`` nor ``label-``."""


@dataclass(frozen=True)
class LensStep:
    label: str
    op: str
    focal: Optional[int] = None

    @property
    def box(self) -> int:
        return holiday_hash(self.label)


def parse_step(step: str) -> LensStep:
    """Parse ``label=N`` (insert) or ``label-`` (remove)."""
    match = _STEP_RE.match(step)
    if not match:
        raise StepParseError(f"Malformed step {step!r}")
    if match.group("insert"):
        return LensStep(match.group("label"), "=", int(match.group("focal")))
    return LensStep(match.group("label"), "-")


class LensBoxes:
    """Fixed row of boxes, each holding lenses in insertion order."""

    def __init__(self, box_count: int = 256) -> None:
        self.boxes: List[Dict[str, int]] = [{} for _ in range(box_count)]

    def apply(self, step: LensStep) -> None:
        box = self.boxes[step.box % len(self.boxes)]
        if step.op == "=":
            # dict assignment keeps the slot of an existing label
            box[step.label] = step.focal
        else:
            box.pop(step.label, None)

    def run(self, steps: Iterable[str]) -> "LensBoxes":
        """Parse and apply every step in ``steps``."""
        count = 0
        for raw in steps:
            self.apply(parse_step(raw))
            count += 1
        logger.debug("Applied %d lens steps", count)
        return self

    def contents(self, box: int) -> List[Tuple[str, int]]:
        return list(self.boxes[box].items())

    def focusing_power(self) -> int:
        """Return the sum of ``(box + 1) * (slot + 1) * focal`` over all lenses."""
        total = 0
        for box_idx, box in enumerate(self.boxes, start=1):
            for slot, focal in enumerate(box.values(), start=1):
                total += box_idx * slot * focal
        return total


__all__ = ["StepParseError", "LensStep", "parse_step", "LensBoxes"]
