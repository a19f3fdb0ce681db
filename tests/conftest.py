"""Shared fixtures for text2cal tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from text2cal.log import SDK_LOGGERS

_TEXT2CAL_ENV_VARS = (
    "TEXT2CAL_PROVIDER",
    "TEXT2CAL_ENDPOINT",
    "TEXT2CAL_MODEL",
    "TEXT2CAL_API_KEY",
    "TEXT2CAL_FORCE_JSON",
    "TEXT2CAL_KEEP_LANGUAGES",
    "TEXT2CAL_TRANSLATE_TO",
    "TEXT2CAL_TIMEOUT",
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "LANGUAGE",
    "LOG_LEVEL",
)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all text2cal-related environment variables.

    Patches ``load_dotenv`` so a real ``.env`` file cannot re-inject values
    that the test explicitly removed.
    """
    monkeypatch.setattr("text2cal.config.load_dotenv", lambda *_a, **_kw: None)
    for key in _TEXT2CAL_ENV_VARS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture()
def monkeypatch_env(clean_env: None, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set a complete, valid text2cal environment.

    Returns the dict of variables so tests can inspect or override values.
    """
    env_vars = {
        "OPENAI_API_KEY": "test-openai-key-12345",
        "TEXT2CAL_KEEP_LANGUAGES": "de-CH,en",
        "TEXT2CAL_TRANSLATE_TO": "English",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture(autouse=True)
def _reset_root_logger() -> Generator[None, None, None]:
    """Reset the root and SDK loggers after each test to prevent leaks."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sdk_levels = {name: logging.getLogger(name).level for name in SDK_LOGGERS}
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    for name, level in sdk_levels.items():
        logging.getLogger(name).setLevel(level)
