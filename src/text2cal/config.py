"""Configuration loading for text2cal.

Reads settings from environment variables (with .env support via python-dotenv)
and builds the immutable :class:`ExtractionConfig` that is passed explicitly
into every pipeline call.  The pipeline itself never reads the environment.
"""

from __future__ import annotations

import locale
import os
from dataclasses import dataclass, field
from datetime import date

from dotenv import load_dotenv

DEFAULT_ENDPOINT = "https://api.openai.com/v1"
DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_TIMEOUT = 60.0

PROVIDERS = ("openai", "gemini")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class ConfigError(Exception):
    """Raised when configuration is missing or invalid."""


@dataclass(frozen=True)
class ExtractionConfig:
    """Settings for a single extraction call.

    Attributes:
        endpoint: Base URL of an OpenAI-compatible completion API.
        model: Model identifier sent with the request.
        api_key: API key for the endpoint, or ``None``.
        force_structured_response: Ask the endpoint for a single JSON
            object answer.
        keep_languages: Languages the model may keep verbatim
            (e.g. ``"de-CH,en"``).
        translate_to: Language everything else is translated into.
        today: Date used to resolve "today" and "tomorrow".  Defaults to
            the current date when the config is built.
        provider: Completion backend, ``"openai"`` or ``"gemini"``.
        request_timeout: Timeout for the completion request in seconds.
    """

    endpoint: str = DEFAULT_ENDPOINT
    model: str = DEFAULT_MODEL
    api_key: str | None = None
    force_structured_response: bool = True
    keep_languages: str = "en"
    translate_to: str = "en"
    today: date = field(default_factory=date.today)
    provider: str = "openai"
    request_timeout: float = DEFAULT_TIMEOUT

    def __repr__(self) -> str:
        masked = "'***'" if self.api_key else "None"
        return (
            f"ExtractionConfig(endpoint={self.endpoint!r}, "
            f"model={self.model!r}, "
            f"api_key={masked}, "
            f"force_structured_response={self.force_structured_response!r}, "
            f"keep_languages={self.keep_languages!r}, "
            f"translate_to={self.translate_to!r}, "
            f"today={self.today!r}, "
            f"provider={self.provider!r}, "
            f"request_timeout={self.request_timeout!r})"
        )


def load_config(
    today: date | None = None,
    provider: str | None = None,
    endpoint: str | None = None,
) -> ExtractionConfig:
    """Build an :class:`ExtractionConfig` from environment variables.

    Calls :func:`dotenv.load_dotenv` so a ``.env`` file in the working
    directory is picked up automatically.  Blank values and the literal
    string ``"null"`` are treated as unset.

    The API key falls back to ``OPENAI_API_KEY`` only when the endpoint is
    the default OpenAI endpoint, so a default key is never sent to a
    third-party server.  For the ``gemini`` provider it falls back to
    ``GEMINI_API_KEY``.

    Args:
        today: Fixed date for relative-date resolution.  Defaults to the
            current date.
        provider: Completion provider, overriding ``TEXT2CAL_PROVIDER``.
            Also selects the default model and key variable.
        endpoint: API base URL, overriding ``TEXT2CAL_ENDPOINT``.

    Returns:
        A validated :class:`ExtractionConfig`.

    Raises:
        ConfigError: If a variable holds an invalid value.  The message
            names the variable.
    """
    load_dotenv()

    provider = (provider or _env("TEXT2CAL_PROVIDER") or "openai").lower()
    if provider not in PROVIDERS:
        raise ConfigError(
            f"Invalid TEXT2CAL_PROVIDER: {provider!r} "
            f"(expected one of: {', '.join(PROVIDERS)})"
        )

    endpoint = endpoint or _env("TEXT2CAL_ENDPOINT") or DEFAULT_ENDPOINT
    default_model = DEFAULT_GEMINI_MODEL if provider == "gemini" else DEFAULT_MODEL
    model = _env("TEXT2CAL_MODEL") or default_model

    api_key = _env("TEXT2CAL_API_KEY")
    if api_key is None:
        if provider == "gemini":
            api_key = _env("GEMINI_API_KEY")
        elif endpoint == DEFAULT_ENDPOINT:
            api_key = _env("OPENAI_API_KEY")

    device_languages = device_language_tags()
    keep_languages = _env("TEXT2CAL_KEEP_LANGUAGES") or ",".join(device_languages)
    translate_to = _env("TEXT2CAL_TRANSLATE_TO") or device_languages[0].split("-")[0]

    return ExtractionConfig(
        endpoint=endpoint,
        model=model,
        api_key=api_key,
        force_structured_response=_env_bool("TEXT2CAL_FORCE_JSON", default=True),
        keep_languages=keep_languages,
        translate_to=translate_to,
        today=today or date.today(),
        provider=provider,
        request_timeout=_env_timeout("TEXT2CAL_TIMEOUT"),
    )


def device_language_tags() -> list[str]:
    """Return the user's preferred languages as BCP 47 tags.

    Uses the colon-separated ``LANGUAGE`` variable when set, otherwise the
    current locale.  Falls back to ``["en"]``.
    """
    names = [n for n in os.environ.get("LANGUAGE", "").split(":") if n.strip()]
    if not names:
        current = locale.getlocale()[0]
        if current:
            names = [current]

    tags: list[str] = []
    for name in names:
        tag = _to_language_tag(name)
        if tag and tag not in tags:
            tags.append(tag)
    return tags or ["en"]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _to_language_tag(name: str) -> str:
    """Convert a POSIX locale name (``de_CH.UTF-8``) to a tag (``de-CH``)."""
    name = name.split(".")[0].split("@")[0].strip()
    if name in {"", "C", "POSIX"}:
        return ""
    return name.replace("_", "-")


def _env(name: str) -> str | None:
    raw = os.environ.get(name, "").strip()
    if not raw or raw == "null":
        return None
    return raw


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: {raw!r}")


def _env_timeout(name: str) -> float:
    raw = _env(name)
    if raw is None:
        return DEFAULT_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"Invalid number for {name}: {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{name} must be positive, got {raw!r}")
    return value
