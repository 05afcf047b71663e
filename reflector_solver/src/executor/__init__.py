"""Execution utilities for tilting and spinning the platform."""

from .compactor import (
    Direction,
    compact,
    compact_line,
    spin_cycle,
    tilt_east,
    tilt_north,
    tilt_south,
    tilt_west,
)
from .simulator import (
    CycleReport,
    SimulationResult,
    north_load,
    run_spins,
    simulate_platform,
)

__all__ = [
    "Direction",
    "compact",
    "compact_line",
    "spin_cycle",
    "tilt_north",
    "tilt_south",
    "tilt_west",
    "tilt_east",
    "CycleReport",
    "SimulationResult",
    "run_spins",
    "simulate_platform",
    "north_load",
]
