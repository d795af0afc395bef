"""Unit tests for the logging module."""

import logging

from env_utils.core.filesystem import MemoryFilesystemView
from env_utils.core.scanner import DefinitionScanner
from env_utils.utils.logging import (
    StructuredFormatter,
    configure_logging,
    get_logger,
    get_logger_with_context,
    log_duration,
)


class TestStructuredFormatter:
    """Tests for StructuredFormatter."""

    def _record(self, **extra):
        record = logging.LogRecord("env_utils.test", logging.INFO, __file__, 1, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_plain_message(self):
        """Test a record without context fields."""
        formatter = StructuredFormatter("%(message)s")
        assert formatter.format(self._record()) == "hello"

    def test_context_fields_appended(self):
        """Test that bound fields follow the message."""
        formatter = StructuredFormatter("%(message)s")
        record = self._record(context_fields={"root": "services", "files": 3})
        assert formatter.format(record) == "hello root=services files=3"


class TestLoggers:
    """Tests for logger helpers."""

    def test_get_logger_prefix(self):
        """Test that module loggers sit under env_utils."""
        assert get_logger("scanner").name == "env_utils.scanner"
        assert get_logger("env_utils.core.scanner").name == "env_utils.core.scanner"

    def test_context_reaches_output(self, capsys):
        """Test that adapter fields appear in handler output."""
        configure_logging(level="DEBUG")
        get_logger_with_context("test", root="app").info("Indexed %d files", 2)

        assert "INFO: Indexed 2 files root=app" in capsys.readouterr().err

    def test_structured_format(self, capsys):
        """Test the timestamped format."""
        configure_logging(level="INFO", structured=True)
        get_logger("test").info("ready")

        err = capsys.readouterr().err
        assert "INFO env_utils.test ready" in err

    def test_level_filters(self, capsys):
        """Test that records below the level are dropped."""
        configure_logging(level="WARNING")
        get_logger("test").info("hidden")
        assert capsys.readouterr().err == ""

    def test_log_duration(self, capsys):
        """Test that elapsed time is logged at debug level."""
        configure_logging(level="DEBUG")
        with log_duration(get_logger("test"), "Indexing"):
            pass
        assert "Indexing took" in capsys.readouterr().err

    def test_scanner_logs_root_name(self, capsys):
        """Test that per-root scan messages carry the root name."""
        configure_logging(level="DEBUG")
        fs = MemoryFilesystemView({"/ws/services/a.env": "A=1\n"})
        DefinitionScanner(fs=fs).scan(["/ws/services"])

        err = capsys.readouterr().err
        assert "Found 1 definition files root=services" in err
