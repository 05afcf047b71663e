from __future__ import annotations

"""Spin cycle simulator with period detection."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from reflector_solver.src.core.grid import Grid
from reflector_solver.src.executor.compactor import spin_cycle, tilt_north
from reflector_solver.src.scoring.weight import compute_weight
from reflector_solver.src.utils import config_loader
from reflector_solver.src.utils.logger import get_logger
from reflector_solver.simulator import log_cycle_event

logger = get_logger(__name__)


@dataclass
class CycleReport:
    """Bookkeeping for one :func:`run_spins` call."""

    requested: int
    executed: int = 0
    cycle_start: Optional[int] = None
    period: Optional[int] = None
    collisions: int = 0

    @property
    def shortcut_taken(self) -> bool:
        return self.period is not None and self.executed < self.requested


@dataclass
class SimulationResult:
    grid: Grid
    weight: int
    report: CycleReport


def run_spins(
    grid: Grid,
    cycles: int,
    shortcut: bool = True,
    *,
    verify_states: bool = True,
) -> CycleReport:
    """Apply ``cycles`` spin cycles to ``grid`` in place.

    After every spin the grid fingerprint is looked up in a table of first
    occurrences. A hit at iteration ``j`` while on iteration ``i`` means the
    states repeat with period ``i - j``; with ``shortcut`` enabled only
    ``(cycles - i - 1) % period`` further spins are run, which lands on the
    same state as the full loop. Without ``shortcut`` every spin is executed.

    Fingerprints are 64-bit digests and may collide. With ``verify_states``
    the serialized grid is stored next to each fingerprint and a hit only
    counts when the states are equal. Only the first state seen for a
    fingerprint is kept, so a colliding state is never stored; if that state
    is the one that repeats, no shortcut is taken and all ``cycles`` spins
    run. The final grid is still exact.
    """

    report = CycleReport(requested=cycles)
    seen: Dict[int, Tuple[int, Optional[str]]] = {}

    i = 0
    while i < cycles:
        spin_cycle(grid)
        report.executed += 1
        key = grid.fingerprint()
        snapshot = grid.serialize() if verify_states else None
        hit = seen.get(key)
        if hit is None:
            seen[key] = (i, snapshot)
            i += 1
            continue

        first_seen, stored = hit
        if verify_states and stored != snapshot:
            report.collisions += 1
            log_cycle_event(
                event_type="collision",
                iteration=i,
                first_seen=first_seen,
                fingerprint=key,
                message="fingerprint matched a different grid state",
            )
            i += 1
            continue

        if report.period is None:
            report.cycle_start = first_seen
            report.period = i - first_seen
            log_cycle_event(
                event_type="cycle",
                iteration=i,
                first_seen=first_seen,
                fingerprint=key,
                message=f"state repeats with period {report.period}",
            )
        if shortcut:
            remaining = (cycles - i - 1) % report.period
            for _ in range(remaining):
                spin_cycle(grid)
            report.executed += remaining
            break
        i += 1

    if report.period is not None:
        logger.info(
            "Cycle of period %d found at iteration %d; executed %d of %d spins",
            report.period,
            report.cycle_start,
            report.executed,
            cycles,
        )
    if report.collisions:
        logger.warning("%d fingerprint collisions ignored", report.collisions)
    return report


def simulate_platform(
    grid: Grid,
    cycles: int | None = None,
    shortcut: bool | None = None,
) -> SimulationResult:
    """Run the spin simulation on ``grid`` and score the final state.

    ``cycles`` and ``shortcut`` default to the configured values.
    """

    if cycles is None:
        cycles = config_loader.CYCLE_COUNT
    if shortcut is None:
        shortcut = config_loader.SHORTCUT_ENABLED
    report = run_spins(
        grid, cycles, shortcut, verify_states=config_loader.VERIFY_STATES
    )
    return SimulationResult(grid=grid, weight=compute_weight(grid), report=report)


def north_load(grid: Grid) -> int:
    """Return the weight after a single north tilt, leaving ``grid`` untouched."""
    tilted = grid.copy()
    tilt_north(tilted)
    return compute_weight(tilted)


__all__ = [
    "CycleReport",
    "SimulationResult",
    "run_spins",
    "simulate_platform",
    "north_load",
]
