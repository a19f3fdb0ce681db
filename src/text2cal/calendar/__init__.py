"""Hand-off of extracted events to a calendar.

Modules:
    event_mapper: Builds the payload a calendar insertion request expects.
"""

from __future__ import annotations

from text2cal.calendar.event_mapper import map_to_insert_payload

__all__ = ["map_to_insert_payload"]
