"""Metadata describing commands by their input pattern."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .pattern import CompiledPattern, compile_pattern


def command_prefix(pattern: str) -> str:
    """Leading literal text of a pattern without trailing whitespace."""
    return compile_pattern(pattern).literal_prefix.rstrip()


@dataclass(frozen=True)
class CommandSpec:
    """A single command: the pattern its input follows plus help text."""

    pattern: str
    description: str = ""
    aliases: Tuple[str, ...] = ()

    @property
    def compiled(self) -> CompiledPattern:
        return compile_pattern(self.pattern)

    @property
    def all_patterns(self) -> Tuple[str, ...]:
        return (self.pattern, *self.aliases)

    @property
    def literal_prefix(self) -> str:
        """Leading literal text of the pattern, e.g. `create stream`."""
        return command_prefix(self.pattern)

    def alias_display(self) -> str:
        """Return formatted alias hint for help output."""
        if not self.aliases:
            return ""
        rendered = ", ".join(f"`{alias}`" for alias in self.aliases)
        return f" (aliases: {rendered})"
