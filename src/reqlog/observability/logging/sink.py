"""Observability – LogSink port and the logger-backed sink."""
from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from reqlog.observability.logging.processors import get_logger
from reqlog.observability.logging.protocol import Logger, Severity


@runtime_checkable
class LogSink(Protocol):
    """Port: receives finished request log lines.

    Two call shapes: ``log(severity, text)`` for plain records and
    ``log(severity, text, error)`` when a diagnostic object must be attached
    rather than embedded in the text.
    """

    def log(self, severity: Severity, text: str, error: BaseException | None = None) -> None: ...


class LoggerSink:
    """Forward request log lines to a structlog or stdlib logger.

    Attached errors are passed as ``exc_info`` so the backend renders the
    full traceback next to the line.

    Parameters
    ----------
    logger:
        Any object satisfying :class:`~reqlog.observability.logging.Logger`.
        Defaults to the ``reqlog.tracker.request_logger`` structlog logger.
    """

    def __init__(self, logger: Logger | Any = None) -> None:
        self._logger = logger if logger is not None else get_logger("reqlog.tracker.request_logger")

    @property
    def logger(self) -> Any:
        return self._logger

    def log(self, severity: Severity, text: str, error: BaseException | None = None) -> None:
        method = getattr(self._logger, severity.value)
        if error is None:
            method(text)
        else:
            method(text, exc_info=error)


__all__ = ["LogSink", "LoggerSink"]
