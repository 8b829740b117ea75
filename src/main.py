"""CLI entry point."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from .core import ConfigError, InvalidPattern, PatternMismatch, StringsCompleter, load_config
from .core.commands.pattern import match_pattern

LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="common-cli",
        description="common-cli - try command patterns and completions from the shell",
    )
    parser.add_argument("--config-dir", default=None, help="Directory holding .env and config.yaml")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    match_parser = subparsers.add_parser(
        "match",
        help="Match input against a command pattern and print the arguments as JSON",
    )
    match_parser.add_argument("pattern", help="e.g. 'create stream <stream-id> [ttl <ttl>]'")
    match_parser.add_argument("input", help="the command line to parse")

    complete_parser = subparsers.add_parser(
        "complete",
        help="Print the candidates starting with a prefix",
    )
    complete_parser.add_argument("prefix")
    complete_parser.add_argument("candidates", nargs="*")
    return parser


def cli(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config_dir)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1

    log_level_name = (args.log_level or config.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, log_level_name, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    LOGGER.debug("Using config directory: %s", config.config_dir)

    if args.command == "match":
        return _run_match(args.pattern, args.input)
    if args.command == "complete":
        return _run_complete(args.prefix, args.candidates)
    parser.print_help()
    return 1


def _run_match(pattern: str, text: str) -> int:
    try:
        arguments = match_pattern(pattern, text)
    except InvalidPattern as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except PatternMismatch as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print(json.dumps(dict(arguments), indent=2, sort_keys=True))
    return 0


def _run_complete(prefix: str, candidates: Sequence[str]) -> int:
    completer = StringsCompleter.from_strings(candidates)
    for candidate in completer.candidates(prefix):
        print(candidate)
    return 0


def run() -> None:
    sys.exit(cli())
