"""Tracker – completion events, classification, formatting and the request logger."""

from reqlog.tracker.base import MultiplexingRequestTracker, NoopRequestTracker, RequestTracker
from reqlog.tracker.classifier import Classification, classify
from reqlog.tracker.events import (
    BatchRequest,
    CompletionEvent,
    Endpoint,
    ErrorEvent,
    NamedValues,
    Node,
    NodeErrorEvent,
    NodeSuccessEvent,
    Request,
    SimpleRequest,
    SuccessEvent,
)
from reqlog.tracker.formatter import (
    FURTHER_VALUES_TRUNCATED,
    TRUNCATED,
    FormattedRecord,
    RequestLogFormatter,
    render_value,
    summarize_error,
    truncate,
)
from reqlog.tracker.policy import LoggingPolicy
from reqlog.tracker.request_logger import RequestLogger

__all__ = [
    "FURTHER_VALUES_TRUNCATED",
    "TRUNCATED",
    "BatchRequest",
    "Classification",
    "CompletionEvent",
    "Endpoint",
    "ErrorEvent",
    "FormattedRecord",
    "LoggingPolicy",
    "NamedValues",
    "MultiplexingRequestTracker",
    "Node",
    "NodeErrorEvent",
    "NodeSuccessEvent",
    "NoopRequestTracker",
    "Request",
    "RequestLogFormatter",
    "RequestLogger",
    "RequestTracker",
    "SimpleRequest",
    "SuccessEvent",
    "classify",
    "render_value",
    "summarize_error",
    "truncate",
]
