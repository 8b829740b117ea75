"""Custom exception hierarchy for common-cli."""


class CommonCliError(Exception):
    """Base error type."""


class PatternMismatch(CommonCliError, ValueError):
    """Raised when input does not conform to a command pattern."""

    def __init__(self, pattern: str, text: str) -> None:
        super().__init__(f"Expected format: {pattern}")
        self.pattern = pattern
        self.text = text


class InvalidPattern(CommonCliError, ValueError):
    """Raised when a command pattern itself cannot be tokenized."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason


class CommandNotFound(CommonCliError):
    pass


class ConfigError(CommonCliError):
    pass
