"""Utility functions and helpers for medialib."""

from medialib.utils.errors import (
    ConfigError,
    ConfigNotFoundError,
    ContractViolationError,
    InvalidConfigError,
    InvalidMediaPathError,
    MedialibError,
    require,
)

__all__ = [
    "MedialibError",
    "ContractViolationError",
    "InvalidMediaPathError",
    "ConfigError",
    "InvalidConfigError",
    "ConfigNotFoundError",
    "require",
]
