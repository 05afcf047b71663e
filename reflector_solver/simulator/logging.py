from __future__ import annotations

"""Logging utilities for spin simulation diagnostics."""

from typing import Dict, List
import json
from collections import Counter

cycle_events_log: List[Dict] = []


def log_cycle_event(
    *,
    event_type: str,
    iteration: int,
    first_seen: int | None = None,
    fingerprint: int | None = None,
    message: str,
    grid_snapshot: str | None = None,
) -> None:
    """Record a cycle detector event with optional context."""
    entry = {
        "type": event_type,
        "iteration": iteration,
        "message": message,
    }
    if first_seen is not None:
        entry["first_seen"] = first_seen
    if fingerprint is not None:
        entry["fingerprint"] = f"{fingerprint:016x}"
    if grid_snapshot is not None:
        entry["grid_snapshot"] = grid_snapshot
    cycle_events_log.append(entry)


def summarize_events_by_type() -> Dict[str, int]:
    """Return a histogram of recorded event types."""
    counts = Counter(entry.get("type", "") for entry in cycle_events_log)
    return dict(counts)


def clear_cycle_events() -> None:
    cycle_events_log.clear()


def export_events_json(path: str) -> None:
    """Dump recorded events to ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(cycle_events_log, f, indent=2)
