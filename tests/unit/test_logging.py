"""
Unit tests for logging module.
"""

import logging

from docs_server.core.logging import (
    DocsServerFormatter,
    StructuredLogger,
    get_logger,
    setup_logging,
)


def make_record(msg: str = "Test message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="test.py",
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestDocsServerFormatter:
    """Test custom formatter."""

    def test_format_basic_log(self):
        """Test basic log formatting."""
        result = DocsServerFormatter().format(make_record())
        assert "ℹ️" in result
        assert "Test message" in result

    def test_format_with_extra_data(self):
        """Test formatting with extra data."""
        record = make_record()
        record.extra_data = {"key": "value", "count": 42}
        result = DocsServerFormatter().format(record)
        assert "key=value" in result
        assert "count=42" in result

    def test_format_error_emoji(self):
        result = DocsServerFormatter().format(make_record(level=logging.ERROR))
        assert "❌" in result


class TestStructuredLogger:
    """Test structured logger."""

    def test_logger_creation(self):
        logger = StructuredLogger("test_logger")
        assert logger.logger.name == "test_logger"

    def test_extras_reach_records(self, caplog):
        """Test keyword extras are attached to the emitted record."""
        logger = get_logger("docs_server.test")
        with caplog.at_level(logging.INFO, logger="docs_server.test"):
            logger.info("Served request", tool="search_docs")

        record = caplog.records[-1]
        assert record.getMessage() == "Served request"
        assert record.extra_data == {"tool": "search_docs"}

    def test_disabled_level_is_skipped(self, caplog):
        logger = get_logger("docs_server.quiet")
        with caplog.at_level(logging.WARNING, logger="docs_server.quiet"):
            logger.debug("hidden", detail="x")
        assert not [r for r in caplog.records if r.name == "docs_server.quiet"]


class TestLoggingSetup:
    """Test logging setup functions."""

    def test_get_logger(self):
        assert isinstance(get_logger("test_module"), StructuredLogger)

    def test_setup_logging_levels(self):
        """Test different log levels."""
        for level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            setup_logging(level)
            assert logging.getLogger().level == getattr(logging, level)

    def test_setup_logging_with_file(self, tmp_path):
        """Test logging setup with file."""
        log_file = tmp_path / "logs" / "test.log"
        setup_logging("DEBUG", log_file)

        logging.getLogger("test").info("Test log message")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.exists()
        assert "Test log message" in log_file.read_text()
