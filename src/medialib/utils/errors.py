"""Custom exceptions for medialib."""

from pathlib import Path


class MedialibError(Exception):
    """Base exception for all medialib errors."""

    pass


class ContractViolationError(MedialibError):
    """A caller broke a documented precondition.

    Raised for absent required arguments, out-of-range episode numbers,
    advancing an empty sequence, reading an unset tag, and looking up a
    title that is not registered. These are programming errors on the
    caller's side and are never turned into a default value.
    """

    pass


class InvalidMediaPathError(MedialibError):
    """A media path cannot back a new catalog item.

    Attributes:
        path: The rejected path.
        suggestion: Hint for the caller on how to recover.
    """

    def __init__(self, path: Path, message: str, suggestion: str | None = None) -> None:
        self.path = path
        self.suggestion = suggestion
        super().__init__(message)


class ConfigError(MedialibError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""

    pass


def require(condition: bool, message: str) -> None:
    """Raise ContractViolationError unless condition holds."""
    if not condition:
        raise ContractViolationError(message)
