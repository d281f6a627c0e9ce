"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from medialib.config.logging import setup_logging


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_installs_rich_handler(self) -> None:
        logger = setup_logging()

        assert logger.name == "medialib"
        assert logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_verbose_enables_debug(self) -> None:
        assert setup_logging(verbose=True, level="ERROR").level == logging.DEBUG

    def test_level_name(self) -> None:
        assert setup_logging(level="warning").level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        assert setup_logging(level="chatty").level == logging.INFO

    def test_repeat_calls_do_not_duplicate_handlers(self) -> None:
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path: Path) -> None:
        """Test that records are written to the log file."""
        log_file = tmp_path / "logs" / "medialib.log"
        logger = setup_logging(log_file=log_file)

        logging.getLogger("medialib.library").info("registered something")
        for handler in logger.handlers:
            handler.flush()

        assert "registered something" in log_file.read_text()
