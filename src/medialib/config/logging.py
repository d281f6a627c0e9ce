"""Logging setup for medialib."""

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(
    verbose: bool = False,
    log_file: Path | None = None,
    level: str | None = None,
) -> logging.Logger:
    """Configure the ``medialib`` logger.

    Logs go to stderr through rich, and optionally to a plain-text file.
    Calling this again replaces the handlers installed by a previous call.

    Args:
        verbose: Log at DEBUG regardless of ``level``.
        log_file: Also write logs to this file.
        level: Level name such as "INFO". Defaults to INFO.

    Returns:
        The configured package logger.
    """
    if verbose:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName((level or "INFO").upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logger = logging.getLogger("medialib")
    logger.setLevel(resolved)

    # Clear existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    console_handler.setLevel(resolved)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        file_handler.setLevel(resolved)
        logger.addHandler(file_handler)

    return logger
