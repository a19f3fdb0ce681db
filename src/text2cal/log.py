"""Logging for the text2cal command line.

Library modules only create named loggers.  The CLI calls
:func:`configure_cli_logging`, which picks the level from ``-v`` or
``LOG_LEVEL`` and installs a single stderr handler.  The HTTP and SDK
loggers underneath the completion clients are held at WARNING so that
``-v`` shows the prompt, the raw answer and the fallbacks instead of
transport chatter.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Loggers of the libraries behind OpenAICompletionClient and
# GeminiCompletionClient.
SDK_LOGGERS = ("openai", "httpx", "httpcore", "google_genai")


class _CliHandler(logging.StreamHandler):
    """stderr handler owned by :func:`configure_cli_logging`."""

    def __init__(self) -> None:
        super().__init__(sys.stderr)
        self.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))


def resolve_log_level(verbose: bool = False) -> str:
    """``"DEBUG"`` for ``-v``, else ``LOG_LEVEL``, else ``"INFO"``."""
    if verbose:
        return "DEBUG"
    return os.environ.get(LOG_LEVEL_ENV) or "INFO"


def configure_cli_logging(level: str = "INFO") -> logging.Handler:
    """Route log records to stderr at *level*.

    Safe to call again: the existing handler is reused and only its level
    changes.  Handlers installed by a host application are left alone.

    Args:
        level: A logging level name such as ``"DEBUG"``; case-insensitive.

    Returns:
        The stderr handler.

    Raises:
        ValueError: If *level* is not a logging level name.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    handler = next((h for h in root.handlers if isinstance(h, _CliHandler)), None)
    if handler is None:
        handler = _CliHandler()
        root.addHandler(handler)

    root.setLevel(numeric_level)
    handler.setLevel(numeric_level)

    sdk_level = max(numeric_level, logging.WARNING)
    for name in SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    return handler
