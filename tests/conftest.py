"""Shared fixtures for medialib tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from medialib.library import Library


@pytest.fixture(autouse=True)
def fresh_library(monkeypatch: pytest.MonkeyPatch) -> Library:
    """Give every test its own process-wide library."""
    library = Library()
    monkeypatch.setattr(Library, "_instance", library)
    return library


@pytest.fixture(autouse=True)
def restore_logger() -> Iterator[None]:
    """Undo handler and level changes made by setup_logging."""
    logger = logging.getLogger("medialib")
    level = logger.level
    handlers = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def media_dir(tmp_path: Path) -> Path:
    """Create a directory holding a few fake video files."""
    directory = tmp_path / "media"
    directory.mkdir()
    for name in ("one.mp4", "two.mp4", "three.mp4"):
        (directory / name).write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return directory
