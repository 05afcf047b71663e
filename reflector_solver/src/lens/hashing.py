"""Holiday ASCII string hashing and step parsing."""

from __future__ import annotations

import re
from typing import Iterable, List

_STEP_SPLIT = re.compile(r"[,\r\n]")


def holiday_hash(text: str) -> int:
    """Return the 8-bit HASH value of ``text``.

    Every byte is added to the running value, which is then multiplied by 17
    and reduced modulo 256.
    """

    value = 0
    for byte in text.encode("utf-8"):
        value = ((value + byte) * 17) % 256
    return value


def parse_steps(text: str) -> List[str]:
    """Split an initialization sequence into steps.

    Commas and line breaks both separate steps; surrounding whitespace is
    stripped and empty steps are dropped.
    """

    return [step.strip() for step in _STEP_SPLIT.split(text) if step.strip()]


def hash_sum(steps: Iterable[str]) -> int:
    return sum(holiday_hash(step) for step in steps)


__all__ = ["holiday_hash", "parse_steps", "hash_sum"]
