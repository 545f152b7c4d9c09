"""Tracker – RequestLogger, the request outcome log emitter."""
from __future__ import annotations

from reqlog.config import ConfigProfile
from reqlog.observability.logging import LoggerSink, LogSink
from reqlog.tracker.base import RequestTracker
from reqlog.tracker.classifier import Classification, classify
from reqlog.tracker.events import CompletionEvent, ErrorEvent, Node, Request, SuccessEvent
from reqlog.tracker.formatter import RequestLogFormatter
from reqlog.tracker.policy import LoggingPolicy


class RequestLogger(RequestTracker):
    """Log successful, slow and failed requests according to live configuration.

    Each notification resolves a fresh :class:`LoggingPolicy` from the
    profile it was given, classifies the outcome and, unless the outcome is
    suppressed, formats one line and hands it to the sink. Node-level
    notifications are ignored.

    Usage::

        logger = RequestLogger("s0")
        logger.on_completion(SuccessEvent(request, latency_nanos, node), profile)

    Parameters
    ----------
    log_prefix:
        Identifier written at the start of every line (typically the session name).
    formatter:
        Line formatter; defaults to :class:`RequestLogFormatter`.
    sink:
        Destination of finished lines; defaults to a :class:`LoggerSink`
        over the ``reqlog.tracker.request_logger`` structlog logger.
    """

    def __init__(
        self,
        log_prefix: str,
        formatter: RequestLogFormatter | None = None,
        sink: LogSink | None = None,
    ) -> None:
        self._log_prefix = log_prefix
        self._formatter = formatter or RequestLogFormatter()
        self._sink: LogSink = sink if sink is not None else LoggerSink()

    @property
    def log_prefix(self) -> str:
        return self._log_prefix

    def on_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        self._handle(SuccessEvent(request, latency_nanos, node), profile)

    def on_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node | None = None,
    ) -> None:
        self._handle(ErrorEvent(request, latency_nanos, node, error), profile)

    def on_node_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        # Nothing to do
        pass

    def on_node_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node,
    ) -> None:
        # Nothing to do
        pass

    def on_completion(self, event: CompletionEvent, profile: ConfigProfile) -> None:
        self._handle(event, profile)

    def _handle(self, event: CompletionEvent, profile: ConfigProfile) -> None:
        policy = LoggingPolicy(profile)
        classification = classify(event, policy)
        if classification is Classification.SUPPRESSED:
            return
        record = self._formatter.format(event, classification, policy, self._log_prefix)
        self._sink.log(record.severity, record.text, record.attached_error)


__all__ = ["RequestLogger"]
