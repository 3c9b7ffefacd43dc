"""
Build event logging utilities for FOLIO.

Appends one JSON object per line to site_build_events.log so that build
history can be inspected without parsing the detailed loguru logs.

For detailed within-build logging, use folio.utils.logger instead.

Usage:
    from folio.utils.event_logging import log_build_event

    log_build_event(
        logs_dir=Path("outs/logs"),
        event_type="build_completed",
        source="building",
        pages=1,
    )
"""

import json
from pathlib import Path
from typing import Optional

from folio.utils.timestamp import now_exact

EVENTS_FILENAME = "site_build_events.log"


def get_events_file(logs_dir: Path) -> Path:
    return logs_dir / EVENTS_FILENAME


def log_build_event(logs_dir: Path, event_type: str, source: str, **extra_fields) -> None:
    """
    Log an event to the build event log.

    Args:
        logs_dir: Directory holding the event log
        event_type: Type of event (e.g., "build_started", "build_failed")
        source: Event source (e.g., "building", "cli")
        **extra_fields: Additional event-specific fields (must be JSON serializable)
    """
    logs_dir.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "source": source,
        **extra_fields,
    }

    with open(get_events_file(logs_dir), "a", encoding="utf-8") as f:
        f.write(json.dumps(event) + "\n")


def get_recent_events(
    logs_dir: Path, n: int = 10, event_type: Optional[str] = None
) -> list[dict]:
    """
    Get the last n events from the build log, optionally filtered by type.

    Args:
        logs_dir: Directory holding the event log
        n: Number of recent events to return (default: 10)
        event_type: Filter to only events of this type (optional)

    Returns:
        List of event dicts (most recent last)

    Example:
        # Last 5 failed builds
        events = get_recent_events(logs_dir, 5, event_type="build_failed")
    """
    events_file = get_events_file(logs_dir)
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
