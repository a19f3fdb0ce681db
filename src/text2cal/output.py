"""Console output for extracted events.

:func:`format_event` renders an :class:`~text2cal.models.event.Event` as a
readable block; :func:`format_payload` renders the calendar insertion
payload as JSON for scripting.  The ``print_*`` helpers write to stdout.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime

from text2cal.calendar.event_mapper import map_to_insert_payload
from text2cal.models.event import Event

_BANNER_WIDTH = 60
_SEPARATOR = "=" * _BANNER_WIDTH


def format_event(event: Event) -> str:
    """Render an event as a multi-line string for the console."""
    lines: list[str] = [
        _SEPARATOR,
        f"  {event.title}",
        _SEPARATOR,
        f"  When: {_format_event_time(event.start_time, event.end_time)}",
    ]

    if event.location:
        lines.append(f"  Where: {event.location}")

    lines.append("")
    lines.append("  Description:")
    for line in event.description.splitlines():
        lines.append(f"    {line}" if line else "")

    lines.append(_SEPARATOR)
    return "\n".join(lines)


def format_payload(event: Event) -> str:
    """Render the calendar insertion payload for *event* as indented JSON."""
    return json.dumps(map_to_insert_payload(event), indent=2, ensure_ascii=False)


def print_event(event: Event, as_json: bool = False) -> None:
    """Write the event to stdout, as JSON payload when *as_json* is set."""
    text = format_payload(event) if as_json else format_event(event)
    sys.stdout.write(text + "\n")


def _format_event_time(start: datetime, end: datetime | None) -> str:
    """Format the time span, e.g. ``Thu 2024-08-15 16:00 - 18:00``."""
    start_text = start.strftime("%a %Y-%m-%d %H:%M")
    if end is None:
        return start_text
    if end.date() == start.date():
        return f"{start_text} - {end.strftime('%H:%M')}"
    return f"{start_text} - {end.strftime('%a %Y-%m-%d %H:%M')}"
