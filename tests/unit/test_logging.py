"""Unit tests for logging setup."""

import logging
import logging.handlers

import pytest
import structlog

from ors_bench.config import LoggingConfig
from ors_bench.utils.logging import add_service_context, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    structlog.reset_defaults()


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_configures_structlog(self, restore_logging):
        setup_logging(LoggingConfig(log_level="DEBUG", log_format="json"))
        assert structlog.is_configured()
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_file_logging(self, restore_logging, tmp_path):
        log_file = tmp_path / "logs" / "bench.log"
        setup_logging(LoggingConfig(log_file=str(log_file)))
        assert log_file.parent.is_dir()
        assert any(
            isinstance(handler, logging.handlers.RotatingFileHandler)
            for handler in logging.getLogger().handlers
        )

    def test_service_context(self):
        event = add_service_context(None, "info", {"event": "x"})
        assert event["service"] == "ors-bench"
        assert "version" in event
