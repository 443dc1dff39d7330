"""Tests for depcycle.utils.logging_config module."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from depcycle.utils import logging_config
from depcycle.utils.logging_config import (
    DetectorLogger,
    JsonFormatter,
    LogFormat,
    LogLevel,
    StructuredFormatter,
    configure_logging,
    disable_logging,
    enable_debug_logging,
    get_logger,
)


def _record(**extra):
    record = logging.LogRecord("depcycle", logging.INFO, __file__, 10, "hello", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLogLevel:
    def test_values(self):
        assert LogLevel.DEBUG == "DEBUG"
        assert LogLevel.WARNING == "WARNING"
        assert LogLevel.CRITICAL == "CRITICAL"


class TestLogFormat:
    def test_values(self):
        assert LogFormat.SIMPLE == "simple"
        assert LogFormat.DETAILED == "detailed"
        assert LogFormat.JSON == "json"
        assert LogFormat.STRUCTURED == "structured"


class TestDetectorLogger:
    def test_init_default(self):
        logger = DetectorLogger()
        assert logger.name == "depcycle"
        assert logger.level == LogLevel.WARNING
        assert len(logger.logger.handlers) == 1

    def test_init_custom(self):
        logger = DetectorLogger(name="test", level=LogLevel.DEBUG, format_type=LogFormat.JSON)
        assert logger.name == "test"
        assert isinstance(logger.logger.handlers[0].formatter, JsonFormatter)

    def test_no_console(self):
        logger = DetectorLogger(name="quiet", enable_console=False)
        assert logger.logger.handlers == []

    def test_file_logging(self, tmp_path: Path):
        log_file = tmp_path / "logs" / "depcycle.log"
        logger = DetectorLogger(
            name="filetest",
            level=LogLevel.DEBUG,
            log_file=log_file,
            enable_file=True,
            enable_console=False,
        )
        logger.log_cycle("a", ["a.js", "b.js", "a.js"])
        for handler in logger.logger.handlers:
            handler.flush()
        assert "a.js -> b.js -> a.js" in log_file.read_text(encoding="utf-8")

    def test_pass_logging_helpers(self, caplog):
        logger = DetectorLogger(name="depcycle.helpers", level=LogLevel.INFO)
        with caplog.at_level(logging.INFO, logger="depcycle.helpers"):
            logger.log_pass_start(4)
            logger.log_pass_complete(3, 2, 1.5)
        messages = [r.getMessage() for r in caplog.records]
        assert any("4 modules" in m for m in messages)
        assert any("cycles=2" in m for m in messages)
        assert caplog.records[-1].operation == "pass_complete"


class TestFormatters:
    def test_json(self):
        data = json.loads(JsonFormatter().format(_record(operation="pass_start")))
        assert data["message"] == "hello"
        assert data["operation"] == "pass_start"

    def test_structured(self):
        out = StructuredFormatter().format(_record(cycles_found=2))
        assert "[INFO] depcycle: hello" in out
        assert "cycles_found=2" in out


class TestGlobalLogger:
    def test_returns_same_instance(self):
        assert get_logger() is get_logger()

    def test_configure_replaces_instance(self):
        first = get_logger()
        configured = configure_logging(level=LogLevel.ERROR, enable_console=False)
        assert configured is not first
        assert get_logger() is configured

    def test_disable(self):
        get_logger()
        disable_logging()
        assert logging_config._global_logger.logger.level > logging.CRITICAL

    def test_enable_debug(self):
        get_logger()
        enable_debug_logging()
        assert logging_config._global_logger.level == LogLevel.DEBUG
        assert logging_config._global_logger.logger.level == logging.DEBUG
