"""Observability – structured logging ports and helpers."""
from reqlog.observability.logging.protocol import Logger, Severity
from reqlog.observability.logging.factory import configure_logging
from reqlog.observability.logging.processors import get_logger
from reqlog.observability.logging.sink import LoggerSink, LogSink

__all__ = [
    "LogSink",
    "Logger",
    "LoggerSink",
    "Severity",
    "configure_logging",
    "get_logger",
]
