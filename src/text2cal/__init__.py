"""text2cal: free-form text to calendar event.

Asks an LLM to extract a single event from unstructured text and normalizes
the answer into an event record ready for a calendar.
"""

from __future__ import annotations

from text2cal.config import ConfigError, ExtractionConfig, load_config
from text2cal.exceptions import (
    CompletionError,
    EmptyInputError,
    NoEventFoundError,
    ParseError,
    Text2CalError,
)
from text2cal.models.event import Event, RawEvent
from text2cal.normalizer import normalize_event, parse_date_or_default
from text2cal.parser import parse_response
from text2cal.pipeline import extract_event
from text2cal.prompts import build_prompt

__version__ = "0.1.0"

__all__ = [
    "CompletionError",
    "ConfigError",
    "EmptyInputError",
    "Event",
    "ExtractionConfig",
    "NoEventFoundError",
    "ParseError",
    "RawEvent",
    "Text2CalError",
    "build_prompt",
    "extract_event",
    "load_config",
    "normalize_event",
    "parse_date_or_default",
    "parse_response",
]
