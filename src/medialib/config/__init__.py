"""Configuration loading and logging setup."""

from medialib.config.logging import setup_logging
from medialib.config.manager import ConfigManager
from medialib.config.schema import LibraryConfig

__all__ = ["ConfigManager", "LibraryConfig", "setup_logging"]
