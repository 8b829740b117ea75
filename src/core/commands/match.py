"""Pairs a command with the input that was matched to it."""

from __future__ import annotations

from typing import Optional

from ..models import Arguments
from .pattern import match_pattern
from .registry import CommandSpec


class CommandMatch:
    """Input matched to a command; arguments are parsed on access."""

    def __init__(self, command: CommandSpec, input: str, pattern: Optional[str] = None) -> None:
        self._command = command
        self._input = input
        self._pattern = pattern or command.pattern

    @property
    def command(self) -> CommandSpec:
        return self._command

    @property
    def input(self) -> str:
        return self._input

    @property
    def pattern(self) -> str:
        """The pattern (primary or alias) the input was matched against."""
        return self._pattern

    @property
    def arguments(self) -> Arguments:
        return match_pattern(self._pattern, self._input)

    def __repr__(self) -> str:
        return f"CommandMatch(pattern={self._pattern!r}, input={self._input!r})"
