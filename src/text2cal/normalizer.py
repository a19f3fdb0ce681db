"""Turn a :class:`~text2cal.models.event.RawEvent` into a valid :class:`Event`.

The model's time fields are best-effort strings.  Normalization applies two
silent fallbacks instead of failing:

- an unusable start time becomes the wall-clock time at normalization;
- an unusable end time is dropped.

No cross-field checks are made; an end before the start is kept as-is.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import datetime

from text2cal.models.event import Event, RawEvent

logger = logging.getLogger(__name__)

DESCRIPTION_TEMPLATE = "{summary}\n\nOriginal text:\n{text}"

# ISO 8601 local date-time: date and time, no UTC offset, up to nanosecond
# fractions.  Date-only values and values with an offset are not local
# date-times.
_LOCAL_DATETIME_RE = re.compile(
    r"^(\d{4}-\d{2}-\d{2}T\d{2}:\d{2}(?::\d{2})?)(?:(?<=:\d{2}:\d{2})\.(\d{1,9}))?$"
)


def format_description(summary: str, text: str) -> str:
    """Combine the model summary with the full original text."""
    return DESCRIPTION_TEMPLATE.format(summary=summary, text=text)


def parse_date_or_default(
    value: str | None,
    default: datetime | None,
) -> tuple[datetime | None, bool]:
    """Parse an ISO 8601 local date-time, or fall back to *default*.

    Args:
        value: The string to parse, e.g. ``"2024-08-15T16:00:00"``.
        default: Returned when *value* is missing or not a local date-time.

    Returns:
        A ``(datetime, parsed)`` pair.  ``parsed`` is ``True`` when the
        value came from *value* and ``False`` when *default* was used.
    """
    if value is None:
        return default, False

    match = _LOCAL_DATETIME_RE.match(value.strip())
    if match is None:
        return default, False

    # datetime holds microseconds; extra digits are truncated.
    candidate, fraction = match.groups()
    if fraction:
        candidate = f"{candidate}.{fraction[:6].ljust(6, '0')}"

    try:
        return datetime.fromisoformat(candidate), True
    except ValueError:
        # Well-formed but out of range, e.g. month 13.
        return default, False


def normalize_event(
    raw: RawEvent,
    source_text: str,
    description_template: Callable[[str, str], str] = format_description,
    now: Callable[[], datetime] = datetime.now,
) -> Event:
    """Build the final :class:`Event` from the model's raw answer.

    Args:
        raw: The decoded model answer.
        source_text: The original user text, attached to the description.
        description_template: Called as ``(summary, source_text)`` to build
            the description.
        now: Clock used for the start-time fallback.  Read during this
            call, not when the request was started.

    Returns:
        The normalized event.  ``start_time`` is always set.
    """
    start_time, start_parsed = parse_date_or_default(raw.start_time, now())
    if not start_parsed:
        logger.debug(
            "Start time %r is not a local date-time, using now (%s)",
            raw.start_time,
            start_time.isoformat(),
        )

    end_time, end_parsed = parse_date_or_default(raw.end_time, None)
    if not end_parsed and raw.end_time is not None:
        logger.debug("End time %r is not a local date-time, dropping it", raw.end_time)

    return Event(
        title=raw.title,
        description=description_template(raw.summary, source_text),
        start_time=start_time,
        end_time=end_time,
        location=raw.location,
    )
