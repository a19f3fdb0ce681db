"""Completion clients for the event-extraction call.

A :class:`CompletionClient` sends one prompt and returns the model's raw
text answer.  Two backends are provided:

- :class:`OpenAICompletionClient` -- any OpenAI-compatible chat completion
  endpoint via the ``openai`` SDK (the default).
- :class:`GeminiCompletionClient` -- Google Gemini via ``google-genai``.

Clients hold no per-call state; endpoint, model and key come from the
:class:`~text2cal.config.ExtractionConfig` passed to :meth:`complete`.
Every SDK failure is reported as :class:`~text2cal.exceptions.CompletionError`
and never retried.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx
import openai
from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from text2cal.config import ConfigError, ExtractionConfig
from text2cal.exceptions import CompletionError

logger = logging.getLogger(__name__)

# Passed instead of None so the SDK never falls back to OPENAI_API_KEY.
_NO_API_KEY = ""


class CompletionClient(ABC):
    """Sends a prompt to a text-completion capability."""

    @abstractmethod
    def complete(self, prompt: str, config: ExtractionConfig) -> str:
        """Send *prompt* and return the raw answer text.

        Blocks until the endpoint answers or fails.

        Raises:
            CompletionError: On network, authentication, quota or
                endpoint failures.
        """


class OpenAICompletionClient(CompletionClient):
    """Client for OpenAI-compatible chat completion endpoints.

    The prompt is sent as a single user message.  When
    ``config.force_structured_response`` is set, the request asks for a
    JSON object response format.
    """

    def complete(self, prompt: str, config: ExtractionConfig) -> str:
        request: dict = {
            "model": config.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if config.force_structured_response:
            request["response_format"] = {"type": "json_object"}

        logger.debug(
            "Sending completion request to %s (model=%s)", config.endpoint, config.model
        )
        try:
            client = openai.OpenAI(
                base_url=config.endpoint,
                api_key=config.api_key if config.api_key is not None else _NO_API_KEY,
                timeout=config.request_timeout,
                max_retries=0,
            )
            response = client.chat.completions.create(**request)
        except openai.OpenAIError as exc:
            logger.error("Completion request to %s failed: %s", config.endpoint, exc)
            raise CompletionError(f"Completion request failed: {exc}") from exc

        if not response.choices:
            raise CompletionError("Completion endpoint returned no choices")
        return response.choices[0].message.content or ""


class GeminiCompletionClient(CompletionClient):
    """Client for Google Gemini via the ``google-genai`` SDK.

    ``config.endpoint`` is not used; the SDK talks to Google's API.  When
    ``config.force_structured_response`` is set, the answer MIME type is
    pinned to ``application/json``.
    """

    def complete(self, prompt: str, config: ExtractionConfig) -> str:
        generate_config = None
        if config.force_structured_response:
            generate_config = genai_types.GenerateContentConfig(
                response_mime_type="application/json",
            )

        logger.debug("Sending completion request to Gemini (model=%s)", config.model)
        try:
            client = genai.Client(api_key=config.api_key)
            response = client.models.generate_content(
                model=config.model,
                contents=prompt,
                config=generate_config,
            )
        except genai_errors.APIError as exc:
            logger.error("Gemini API error: %s", exc)
            raise CompletionError(f"Gemini API call failed: {exc}") from exc
        except httpx.HTTPError as exc:
            logger.error("Gemini request failed: %s", exc)
            raise CompletionError(f"Gemini request failed: {exc}") from exc
        except ValueError as exc:
            # Raised by genai.Client when no API key is available.
            raise CompletionError(f"Gemini client could not be created: {exc}") from exc

        return response.text or ""


_CLIENTS: dict[str, type[CompletionClient]] = {
    "openai": OpenAICompletionClient,
    "gemini": GeminiCompletionClient,
}


def build_completion_client(config: ExtractionConfig) -> CompletionClient:
    """Return the completion client for ``config.provider``.

    Raises:
        ConfigError: If the provider is unknown.
    """
    try:
        client_cls = _CLIENTS[config.provider]
    except KeyError:
        raise ConfigError(f"Unknown completion provider: {config.provider!r}") from None
    return client_cls()
