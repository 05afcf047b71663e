"""HASH algorithm and lens box simulation."""

from .hashing import hash_sum, holiday_hash, parse_steps
from .boxes import LensBoxes, LensStep, StepParseError, parse_step

__all__ = [
    "holiday_hash",
    "parse_steps",
    "hash_sum",
    "LensBoxes",
    "LensStep",
    "StepParseError",
    "parse_step",
]
