"""Map a normalized event to a calendar insertion payload.

The payload mirrors what a calendar "insert event" request expects:

- **title** and **description**.
- **begin_time** -- start instant as epoch milliseconds.
- **end_time** -- end instant in the same encoding, only when known.
- **location** -- only when known.

Event times are naive local times.  They are turned into instants with the
local UTC offset at insertion time, not the offset in effect on the event
date.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone

from text2cal.models.event import Event

logger = logging.getLogger(__name__)


def map_to_insert_payload(event: Event, offset: timedelta | None = None) -> dict:
    """Convert an :class:`Event` into a calendar insertion payload.

    Args:
        event: The normalized event.
        offset: UTC offset used to interpret the event times.  Defaults
            to the local offset right now.

    Returns:
        A ``dict`` with ``title``, ``description`` and ``begin_time``, plus
        ``end_time`` and ``location`` when the event has them.
    """
    if offset is None:
        offset = datetime.now().astimezone().utcoffset() or timedelta(0)
    tz = timezone(offset)

    payload: dict = {
        "title": event.title,
        "description": event.description,
        "begin_time": _to_epoch_millis(event.start_time, tz),
    }

    if event.end_time is not None:
        payload["end_time"] = _to_epoch_millis(event.end_time, tz)

    if event.location is not None:
        payload["location"] = event.location

    logger.debug("Mapped event '%s' to insert payload (offset %s)", event.title, offset)

    return payload


def _to_epoch_millis(dt: datetime, tz: timezone) -> int:
    """Epoch milliseconds of *dt* read in *tz*, floored to whole seconds."""
    return math.floor(dt.replace(tzinfo=tz).timestamp()) * 1000
