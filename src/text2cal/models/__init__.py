"""Data models for text2cal."""

from __future__ import annotations

from text2cal.models.event import DEFAULT_TITLE, Event, RawEvent

__all__ = [
    "DEFAULT_TITLE",
    "Event",
    "RawEvent",
]
