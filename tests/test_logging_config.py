"""Tests for logging setup."""

import logging

from rich.logging import RichHandler

from xsd_explorer.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_rich_console_handler(self):
        """The package logger gets a single RichHandler."""
        logger = setup_logging("DEBUG")
        assert logger.name == "xsd_explorer"
        assert logger.level == logging.DEBUG
        assert [type(h) for h in logger.handlers] == [RichHandler]
        assert logger.propagate is False

    def test_repeated_setup_does_not_stack(self):
        """Calling twice replaces the handlers."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_log_file(self, tmp_path):
        """A log file receives the same records."""
        log_file = tmp_path / "codegen.log"
        logger = setup_logging(logging.INFO, log_file=log_file)
        assert any(isinstance(h, logging.FileHandler) for h in logger.handlers)

        get_logger("tests").info("written to file")
        for handler in logger.handlers:
            handler.flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Tests for get_logger()."""

    def test_foreign_name_nested_under_package(self):
        """Names outside the package are nested under it."""
        assert get_logger("tests").name == "xsd_explorer.tests"

    def test_package_names_kept(self):
        """Module names inside the package are used as-is."""
        assert get_logger("xsd_explorer.utils").name == "xsd_explorer.utils"
        assert get_logger("xsd_explorer").name == "xsd_explorer"
