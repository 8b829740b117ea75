"""Core utilities for common-cli."""

from .completers import StringsCompleter
from .config import Config, load_config
from .errors import (
    CommandNotFound,
    CommonCliError,
    ConfigError,
    InvalidPattern,
    PatternMismatch,
)
from .models import Arguments, HttpRequestConfig

__all__ = [
    "Config",
    "load_config",
    "Arguments",
    "HttpRequestConfig",
    "StringsCompleter",
    "CommonCliError",
    "PatternMismatch",
    "InvalidPattern",
    "CommandNotFound",
    "ConfigError",
]
