"""
Export event logging utilities (Tier 2 logging).

Appends one JSON object per line to the export event log so export activity
can be followed across runs (filter by event_type or resume_name).

For detailed within-context logging (Tier 1), use resumekit.utils.logger instead.

Usage:
    from resumekit.utils.event_logging import log_export_event

    log_export_event(
        event_type="export_completed",
        resume_name="Asha Verma",
        source="exporting",
        fmt="pdf",
        size_bytes=48213,
    )
"""

import json
import os
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from resumekit.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("RESUMEKIT_LOGS_PATH", "outs/logs"))
EXPORT_EVENTS_FILE = Path(
    os.getenv("RESUMEKIT_EVENTS_FILE", str(LOGS_PATH / "resume_export_events.log"))
)


def log_export_event(
    event_type: str,
    resume_name: str,
    source: str,
    events_file: Optional[Path] = None,
    **extra_fields,
) -> None:
    """
    Log an event to the export event log.

    Args:
        event_type: Type of event (e.g., "export_started", "export_completed", "export_failed")
        resume_name: Candidate name the export belongs to
        source: Event source (e.g., "exporting", "cli")
        events_file: Log file to append to (default: EXPORT_EVENTS_FILE)
        **extra_fields: Additional event-specific fields
    """
    events_file = Path(events_file or EXPORT_EVENTS_FILE)
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "resume_name": resume_name,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, default=str) + "\n")


def get_recent_events(
    n: int = 10,
    resume_name: Optional[str] = None,
    event_type: Optional[str] = None,
    events_file: Optional[Path] = None,
) -> List[dict]:
    """
    Get the last n events from the export log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        resume_name: Filter to only events for this resume (optional)
        event_type: Filter to only events of this type (optional)
        events_file: Log file to read (default: EXPORT_EVENTS_FILE)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = Path(events_file or EXPORT_EVENTS_FILE)
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

    if resume_name:
        events = [e for e in events if e.get("resume_name") == resume_name]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if len(events) > n else events
