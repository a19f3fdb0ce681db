"""Pipeline orchestrator for the text-to-calendar workflow.

Runs the four stages in order: prompt building, the completion call,
response parsing and normalization.  The entry point is
:func:`extract_event`.  It keeps no state between calls, so it can be
called from several threads at once; the completion call is the only
blocking step.
"""

from __future__ import annotations

import logging

from text2cal.config import ExtractionConfig
from text2cal.exceptions import EmptyInputError, NoEventFoundError
from text2cal.llm import CompletionClient, build_completion_client
from text2cal.models.event import Event
from text2cal.normalizer import normalize_event
from text2cal.parser import parse_response
from text2cal.prompts import build_prompt

logger = logging.getLogger(__name__)


def extract_event(
    text: str,
    config: ExtractionConfig,
    client: CompletionClient | None = None,
) -> Event:
    """Extract a single calendar event from free-form text.

    Errors are never retried or swallowed; each one reaches the caller
    with a message suitable for showing to the user.

    Args:
        text: The text to extract the event from.
        config: Settings for this call.  Not modified.
        client: Completion client to use.  Defaults to the client for
            ``config.provider``.

    Returns:
        The normalized :class:`Event`.

    Raises:
        EmptyInputError: If *text* is empty.  Nothing is sent.
        CompletionError: If the completion call fails.
        ParseError: If the answer is not the expected JSON object.
        NoEventFoundError: If the model reports that there is no event.
    """
    if not text:
        raise EmptyInputError()

    # ------------------------------------------------------------------
    # Stage 1: Build prompt
    # ------------------------------------------------------------------
    prompt = build_prompt(
        text,
        today=config.today,
        keep_languages=config.keep_languages,
        translate_to=config.translate_to,
    )
    logger.debug("Prompt:\n%s", prompt)

    # ------------------------------------------------------------------
    # Stage 2: Completion
    # ------------------------------------------------------------------
    if client is None:
        client = build_completion_client(config)
    answer = client.complete(prompt, config)
    logger.debug("Raw answer:\n%s", answer)

    # ------------------------------------------------------------------
    # Stage 3: Parse
    # ------------------------------------------------------------------
    raw_event = parse_response(answer)
    if raw_event is None:
        logger.info("No event found in the text")
        raise NoEventFoundError()

    # ------------------------------------------------------------------
    # Stage 4: Normalize
    # ------------------------------------------------------------------
    event = normalize_event(raw_event, text)
    logger.info(
        "Extracted event '%s' starting %s",
        event.title,
        event.start_time.isoformat(),
    )
    return event
