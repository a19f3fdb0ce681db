"""Decode the model's answer into a :class:`~text2cal.models.event.RawEvent`.

The answer is expected to be exactly one JSON object, or the literal ``{}``
when the text contains no event.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from text2cal.exceptions import ParseError
from text2cal.models.event import RawEvent

logger = logging.getLogger(__name__)

_EMPTY_ANSWER = "{}"


def parse_response(raw: str) -> RawEvent | None:
    """Parse a raw completion answer.

    Args:
        raw: The text returned by the completion endpoint.

    Returns:
        The decoded :class:`RawEvent`, or ``None`` when the model reported
        that there is no event (``{}``, ignoring surrounding whitespace).
        Any other object, including one without keys, is decoded with the
        field defaults.

    Raises:
        ParseError: If the answer is not valid JSON, is a JSON value other
            than an object, or has fields of the wrong type.
    """
    answer = raw.strip()
    if answer == _EMPTY_ANSWER:
        return None

    try:
        data = json.loads(answer)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"The model answer is not valid JSON: {exc}", raw_response=raw
        ) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"The model answer is not a JSON object (got {type(data).__name__})",
            raw_response=raw,
        )

    try:
        event = RawEvent.model_validate(data)
    except ValidationError as exc:
        raise ParseError(
            f"The model answer has an unexpected shape: {exc}", raw_response=raw
        ) from exc

    logger.debug("Parsed raw event: %r", event)
    return event
