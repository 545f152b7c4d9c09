"""Unit tests for observability logging helpers and the logger sink."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest
import structlog
from structlog.testing import capture_logs

from reqlog.observability.logging import LoggerSink, LogSink, Severity, configure_logging, get_logger


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


class TestSeverity:
    def test_values_are_method_names(self) -> None:
        assert Severity.INFO.value == "info"
        assert Severity.ERROR.value == "error"

    def test_levels(self) -> None:
        assert Severity.INFO.level == logging.INFO
        assert Severity.ERROR.level == logging.ERROR


# ---------------------------------------------------------------------------
# LoggerSink
# ---------------------------------------------------------------------------


class TestLoggerSink:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(LoggerSink(MagicMock()), LogSink)

    def test_plain_call_shape(self) -> None:
        logger = MagicMock()
        LoggerSink(logger).log(Severity.INFO, "line")
        logger.info.assert_called_once_with("line")

    def test_attached_error_call_shape(self) -> None:
        logger = MagicMock()
        error = RuntimeError("boom")
        LoggerSink(logger).log(Severity.ERROR, "line", error)
        logger.error.assert_called_once_with("line", exc_info=error)

    def test_stdlib_logger(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("reqlog.test.sink")
        error = ValueError("bad value")
        with caplog.at_level(logging.INFO, logger="reqlog.test.sink"):
            LoggerSink(logger).log(Severity.INFO, "100% done")
            LoggerSink(logger).log(Severity.ERROR, "failed", error)
        assert [r.getMessage() for r in caplog.records] == ["100% done", "failed"]
        assert [r.levelno for r in caplog.records] == [Severity.INFO.level, Severity.ERROR.level]
        assert caplog.records[1].exc_info is not None
        assert caplog.records[1].exc_info[1] is error

    def test_default_logger_is_structlog(self) -> None:
        with capture_logs() as logs:
            LoggerSink().log(Severity.INFO, "hello")
        assert logs == [{"event": "hello", "log_level": "info"}]


# ---------------------------------------------------------------------------
# get_logger / configure_logging
# ---------------------------------------------------------------------------


class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("reqlog.test", session="s0").info("bound")
        assert logs[0]["session"] == "s0"
        assert logs[0]["event"] == "bound"


@pytest.fixture()
def _restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("_restore_logging")
class TestConfigureLogging:
    def test_json_output(self) -> None:
        configure_logging(logging.INFO)
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)
        assert logging.getLogger().level == logging.INFO

    def test_console_output(self) -> None:
        configure_logging(logging.WARNING, json=False)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1
