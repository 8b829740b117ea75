"""Domain models for common-cli."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar, Dict, Iterator, Optional, Tuple

from .errors import ConfigError


class Arguments(Mapping):
    """Read-only mapping of placeholder name to the value extracted from input."""

    def __init__(self, values: Mapping[str, str], input: str) -> None:
        self._values = MappingProxyType(dict(values))
        self._input = input

    @property
    def input(self) -> str:
        return self._input

    def __getitem__(self, name: str) -> str:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Arguments):
            return dict(self._values) == dict(other._values) and self._input == other._input
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Arguments({dict(self._values)!r}, input={self._input!r})"

    def get_int(self, name: str, default: Optional[int] = None) -> Optional[int]:
        """Return the value as an int, or `default` when the argument is absent."""
        if name not in self._values:
            return default
        return int(self._values[name])


@dataclass(frozen=True)
class HttpRequestConfig:
    """Per-request HTTP settings. Timeouts are in milliseconds."""

    DEFAULT: ClassVar["HttpRequestConfig"]

    connect_timeout: int = 15000
    read_timeout: int = 15000
    verify_ssl_cert: bool = True

    def __post_init__(self) -> None:
        if self.connect_timeout < 0:
            raise ConfigError(f"connect_timeout must be >= 0, got {self.connect_timeout}")
        if self.read_timeout < 0:
            raise ConfigError(f"read_timeout must be >= 0, got {self.read_timeout}")

    @property
    def timeout(self) -> Tuple[Optional[float], Optional[float]]:
        """(connect, read) timeout in seconds, as accepted by `requests`.

        A timeout of 0 means no timeout and maps to None.
        """
        return _seconds(self.connect_timeout), _seconds(self.read_timeout)

    def to_dict(self) -> Dict[str, object]:
        return {
            "connect_timeout": self.connect_timeout,
            "read_timeout": self.read_timeout,
            "verify_ssl_cert": self.verify_ssl_cert,
        }


HttpRequestConfig.DEFAULT = HttpRequestConfig()


def _seconds(milliseconds: int) -> Optional[float]:
    return milliseconds / 1000 if milliseconds else None
