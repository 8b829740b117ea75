"""Tab-completion helpers for interactive shells."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional


class StringsCompleter:
    """Completes a buffer against a set of strings by prefix."""

    def __init__(self, supplier: Callable[[], Iterable[str]]) -> None:
        self._supplier = supplier
        self._matches: List[str] = []

    @classmethod
    def from_strings(cls, strings: Iterable[str]) -> "StringsCompleter":
        fixed = tuple(strings)
        return cls(lambda: fixed)

    def all_candidates(self) -> List[str]:
        return list(self._supplier())

    def candidates(self, buffer: str) -> List[str]:
        return [candidate for candidate in self._supplier() if candidate.startswith(buffer)]

    def complete(self, text: str, state: int) -> Optional[str]:
        """`readline.set_completer` hook: return the `state`-th candidate for `text`."""
        if state == 0:
            self._matches = self.candidates(text)
        try:
            return self._matches[state]
        except IndexError:
            return None
