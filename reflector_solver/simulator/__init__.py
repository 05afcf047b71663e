from .logging import (
    cycle_events_log,
    log_cycle_event,
    summarize_events_by_type,
    clear_cycle_events,
    export_events_json,
)

__all__ = [
    "cycle_events_log",
    "log_cycle_event",
    "summarize_events_by_type",
    "clear_cycle_events",
    "export_events_json",
]
