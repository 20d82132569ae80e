"""Tests for logging setup."""

import logging
from pathlib import Path

from rich.logging import RichHandler

from example_catalog.loading.catalog_builder import load_catalog
from example_catalog.utils.logging import setup_logging


class TestLogging:
    """Tests for setup_logging."""

    def test_verbosity_levels(self):
        assert setup_logging(verbosity=0).level == logging.WARNING
        assert setup_logging(verbosity=1).level == logging.INFO
        assert setup_logging(verbosity=2).level == logging.DEBUG

    def test_handlers_replaced(self):
        """Test that repeated setup doesn't stack console handlers."""
        setup_logging()
        logger = setup_logging()

        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_log_file(self, tmp_path: Path, examples_root: Path, write_text):
        """Test that load problems reach the log file."""
        log_file = tmp_path / "logs" / "catalog.log"
        logger = setup_logging(verbosity=0, log_file=log_file)
        write_text(examples_root / "Koans" / "manifest.json", "{broken")

        load_catalog(examples_root)

        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "manifest_read" in content
        assert "Koans" in content
        assert logger.handlers[0].level == logging.WARNING

        setup_logging(verbosity=0)

    def test_module_loggers_propagate(self, examples_root: Path, caplog):
        """Test that module loggers report under the package logger."""
        setup_logging(verbosity=2)

        with caplog.at_level(logging.DEBUG, logger="example_catalog"):
            load_catalog(examples_root)

        assert any(
            record.name == "example_catalog.loading.folder_resolver"
            for record in caplog.records
        )
