"""Entry point for ``python -m text2cal``.

Extracts a calendar event from text given on the command line, in a file,
or piped on stdin.  Uses stdlib :mod:`argparse` for argument parsing.

Settings come from the environment (see :func:`~text2cal.config.load_config`);
command-line options override them for this run.

Exit codes:
    0 -- An event was extracted.
    1 -- An error occurred (config, file, empty input, completion, parse).
    2 -- Argument parsing error (handled by argparse).
    3 -- The text contains no event.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from datetime import date
from pathlib import Path

from text2cal.config import PROVIDERS, ConfigError, load_config
from text2cal.exceptions import NoEventFoundError, Text2CalError
from text2cal.log import configure_cli_logging, resolve_log_level
from text2cal.output import print_event
from text2cal.pipeline import extract_event

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_EVENT = 3


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="text2cal",
        description="Extract a calendar event from free-form text.",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to extract the event from (default: read --file or stdin).",
    )
    parser.add_argument(
        "-f",
        "--file",
        type=str,
        default=None,
        help="Read the text from this file.",
    )
    parser.add_argument(
        "--provider",
        choices=PROVIDERS,
        default=None,
        help="Completion backend (overrides TEXT2CAL_PROVIDER).",
    )
    parser.add_argument(
        "--endpoint",
        type=str,
        default=None,
        help="OpenAI-compatible API base URL (overrides TEXT2CAL_ENDPOINT).",
    )
    parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model identifier (overrides TEXT2CAL_MODEL).",
    )
    parser.add_argument(
        "--no-force-json",
        dest="force_json",
        action="store_false",
        default=None,
        help="Do not ask the endpoint for a JSON object response.",
    )
    parser.add_argument(
        "--keep-languages",
        type=str,
        default=None,
        help="Languages kept verbatim, e.g. 'de-CH,en'.",
    )
    parser.add_argument(
        "--translate-to",
        type=str,
        default=None,
        help="Language to translate everything else into.",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="Date used for 'today' and 'tomorrow' (YYYY-MM-DD).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the calendar insertion payload as JSON.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable debug-level logging.",
    )
    return parser


def _read_text(args: argparse.Namespace) -> str:
    """Return the input text from the argument, the file, or stdin.

    Raises:
        OSError: If the file cannot be read.
    """
    if args.text is not None:
        return args.text
    if args.file is not None:
        return Path(args.file).read_text(encoding="utf-8")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    return ""


def main(argv: list[str] | None = None) -> int:
    """Run the text2cal CLI.

    Args:
        argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.

    Returns:
        The process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    # --- Configure logging --------------------------------------------
    try:
        configure_cli_logging(resolve_log_level(args.verbose))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    # --- Resolve settings ---------------------------------------------
    try:
        config = load_config(
            today=args.today, provider=args.provider, endpoint=args.endpoint
        )
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    overrides = {
        "model": args.model,
        "force_structured_response": args.force_json,
        "keep_languages": args.keep_languages,
        "translate_to": args.translate_to,
    }
    config = dataclasses.replace(
        config, **{key: value for key, value in overrides.items() if value is not None}
    )

    # --- Read input ---------------------------------------------------
    try:
        text = _read_text(args)
    except OSError as exc:
        print(f"Error: Cannot read input: {exc}", file=sys.stderr)
        return EXIT_ERROR

    # --- Extract ------------------------------------------------------
    try:
        event = extract_event(text, config)
    except NoEventFoundError as exc:
        print(f"{exc}", file=sys.stderr)
        return EXIT_NO_EVENT
    except (Text2CalError, ConfigError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    print_event(event, as_json=args.json)
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
