"""Observability – structured logging and the request log sink."""

from reqlog.observability.logging import (
    LogSink,
    Logger,
    LoggerSink,
    Severity,
    configure_logging,
    get_logger,
)

__all__ = [
    "LogSink",
    "Logger",
    "LoggerSink",
    "Severity",
    "configure_logging",
    "get_logger",
]
