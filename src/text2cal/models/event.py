"""Pydantic models for the extracted calendar event.

Two stages of the same event flow through the pipeline:

- :class:`RawEvent` -- the model's answer decoded as-is.  Only ``title`` and
  ``summary`` are guaranteed; the time fields are unchecked strings.
- :class:`Event` -- the normalized result with parsed ``datetime`` values
  and a guaranteed start time, ready for a calendar collaborator.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TITLE = "Event"


# ---------------------------------------------------------------------------
# RawEvent -- decoded model answer
# ---------------------------------------------------------------------------


class RawEvent(BaseModel):
    """A calendar event exactly as the model described it.

    The JSON answer uses camelCase keys (``startTime``, ``endTime``); they
    are mapped onto snake_case attributes.  Unknown keys are ignored.

    Attributes:
        title: Short event title, ``"Event"`` when the model gave none.
        summary: Short model-written summary, empty when absent.
        location: Event location, or ``None``.
        start_time: Start as the model wrote it (intended ISO 8601), or ``None``.
        end_time: End as the model wrote it (intended ISO 8601), or ``None``.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    title: str = DEFAULT_TITLE
    summary: str = ""
    location: str | None = None
    start_time: str | None = Field(default=None, alias="startTime")
    end_time: str | None = Field(default=None, alias="endTime")

    @field_validator("title", mode="before")
    @classmethod
    def _default_null_title(cls, value: Any) -> Any:
        """Treat an explicit ``null`` title like a missing one."""
        return DEFAULT_TITLE if value is None else value

    @field_validator("summary", mode="before")
    @classmethod
    def _default_null_summary(cls, value: Any) -> Any:
        return "" if value is None else value


# ---------------------------------------------------------------------------
# Event -- normalized pipeline output
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """A normalized calendar event.

    ``start_time`` is always set.  ``end_time`` is only set when the model
    gave a parseable end; it is not checked against ``start_time``.

    Attributes:
        title: Event title.
        description: Model summary combined with the full original text.
        start_time: Event start as a naive local ``datetime``.
        end_time: Event end as a naive local ``datetime``, or ``None``.
        location: Event location, or ``None``.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    start_time: datetime
    end_time: datetime | None = None
    location: str | None = None
