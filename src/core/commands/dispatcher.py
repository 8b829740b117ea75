"""Finds the registered command a line of input belongs to."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from ..completers import StringsCompleter
from ..errors import CommandNotFound, PatternMismatch
from .match import CommandMatch
from .pattern import compile_pattern
from .registry import CommandSpec, command_prefix

LOGGER = logging.getLogger(__name__)


def _prefix_matches(prefix: str, text: str) -> bool:
    if not text.startswith(prefix):
        return False
    rest = text[len(prefix) :]
    return not rest or rest[0].isspace() or not prefix[-1:].isalnum()


class CommandDispatcher:
    """Maps raw input lines to command specs by their pattern."""

    def __init__(self, specs: Sequence[CommandSpec] = ()) -> None:
        self._specs: Tuple[CommandSpec, ...] = tuple(specs)
        for spec in self._specs:
            for pattern in spec.all_patterns:
                compile_pattern(pattern)

    @property
    def specs(self) -> Sequence[CommandSpec]:
        return self._specs

    def _candidates(self, text: str) -> List[Tuple[int, CommandSpec, str]]:
        candidates = []
        for spec in self._specs:
            for pattern in spec.all_patterns:
                prefix = command_prefix(pattern)
                if _prefix_matches(prefix, text):
                    candidates.append((len(prefix), spec, pattern))
        # Longest literal prefix first; sort is stable so declared order breaks ties.
        candidates.sort(key=lambda item: -item[0])
        return candidates

    def find_match(self, text: str) -> CommandMatch:
        """Return the match for the first command whose pattern accepts `text`.

        Raises:
            CommandNotFound: no command's literal prefix starts the input.
            PatternMismatch: a command was recognised but its arguments do not
                fit; carries the pattern of the closest candidate.
        """
        normalized = text.strip()
        candidates = self._candidates(normalized)
        if not candidates:
            raise CommandNotFound(text)

        errors: List[PatternMismatch] = []
        for _, spec, pattern in candidates:
            match = CommandMatch(spec, text, pattern)
            try:
                match.arguments  # parse eagerly
            except PatternMismatch as exc:
                LOGGER.debug("Input %r does not fit %r", normalized, pattern)
                errors.append(exc)
                continue
            LOGGER.debug("Input %r matched command %r", normalized, pattern)
            return match
        raise errors[0]

    def build_help_lines(self) -> list[str]:
        """Render help text for all commands."""

        lines = ["Available commands:"]
        for spec in self._specs:
            alias_hint = spec.alias_display()
            lines.append(f"- `{spec.pattern}` – {spec.description}{alias_hint}")
        return lines

    def completer(self) -> StringsCompleter:
        """Completer over the leading literal text of every command."""
        return StringsCompleter(
            lambda: [
                prefix
                for spec in self._specs
                for prefix in dict.fromkeys(
                    command_prefix(p) for p in spec.all_patterns
                )
                if prefix
            ]
        )
