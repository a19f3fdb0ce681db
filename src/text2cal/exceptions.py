"""Custom exceptions for the text2cal extraction pipeline.

Every failure of :func:`~text2cal.pipeline.extract_event` surfaces as one of
these categories.  Messages are written to be shown to the user as-is; the
caller decides whether to offer a retry.
"""

from __future__ import annotations


class Text2CalError(Exception):
    """Base class for all errors raised by the extraction pipeline."""


class EmptyInputError(Text2CalError):
    """Raised when the text to extract an event from is empty.

    Checked before any other work, so no completion request is made.
    """

    def __init__(self, message: str = "No text entered") -> None:
        super().__init__(message)


class CompletionError(Text2CalError):
    """Raised when the completion endpoint cannot produce an answer.

    Covers network failures, authentication and quota errors, and
    malformed or unreachable endpoints.  The pipeline never retries;
    the user may fix the settings and try again.
    """


class ParseError(Text2CalError):
    """Raised when the model answer is not a JSON object of the expected shape.

    Attributes:
        raw_response: The raw model output that failed to parse.
    """

    def __init__(self, message: str, raw_response: str = "") -> None:
        super().__init__(message)
        self.raw_response = raw_response


class NoEventFoundError(Text2CalError):
    """Raised when the model reports that the text contains no event."""

    def __init__(self, message: str = "No event found in the text") -> None:
        super().__init__(message)
