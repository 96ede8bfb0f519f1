"""
Tests for logging utilities and configuration.
"""

import json
import logging
import sys

from kmlview.core.logging_config import (
    ColoredFormatter,
    JSONFormatter,
    get_log_level,
    setup_logging,
)
from kmlview.utils.logging import PerformanceTimer


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_log_level(self):
        assert get_log_level("DEBUG") == logging.DEBUG
        assert get_log_level("warning") == logging.WARNING
        assert get_log_level("invalid") == logging.INFO

    def test_setup_logging_console_only(self):
        setup_logging(log_level="DEBUG", enable_console=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

        root.handlers.clear()

    def test_setup_logging_with_json_file(self, tmp_path):
        log_file = tmp_path / "logs" / "kmlview.log"
        setup_logging(log_level="INFO", log_file=log_file, json_logs=True, enable_console=False)

        logging.getLogger("kmlview.test").info("hello", extra={"request_id": "r1"})
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        record = json.loads(lines[-1])
        assert record["message"] == "hello"
        assert record["request_id"] == "r1"
        assert record["level"] == "INFO"

        logging.getLogger().handlers.clear()

    def test_json_formatter_exception(self):
        try:
            raise ValueError("bad")
        except ValueError:
            record = logging.LogRecord(
                "x", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
            )

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError" in data["exception"]

    def test_colored_formatter_restores_levelname(self):
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        output = ColoredFormatter("%(levelname)s %(message)s").format(record)

        assert "\033[32m" in output
        assert record.levelname == "INFO"


class TestPerformanceTimer:
    """Tests for PerformanceTimer."""

    def test_logs_duration(self, caplog):
        with caplog.at_level(logging.INFO, logger="kmlview.utils.logging"):
            with PerformanceTimer("parse_kml") as timer:
                pass

        assert timer.duration_ms is not None
        assert "parse_kml completed" in caplog.text

    def test_threshold_suppresses_log(self, caplog):
        with caplog.at_level(logging.INFO, logger="kmlview.utils.logging"):
            with PerformanceTimer("fast", threshold_ms=10_000):
                pass

        assert "fast completed" not in caplog.text
