"""Tracker – outcome classification.

Decides, per completion event, whether it is logged at all and under which
outcome. Runs on every completed request, so boolean gates are checked
before the slow threshold is even read.
"""
from __future__ import annotations

from enum import Enum

from reqlog.kernel.errors import PreconditionViolationError, require_non_negative
from reqlog.observability.logging import Severity
from reqlog.tracker.events import (
    CompletionEvent,
    ErrorEvent,
    NodeErrorEvent,
    NodeSuccessEvent,
    SuccessEvent,
)
from reqlog.tracker.policy import LoggingPolicy


class Classification(str, Enum):
    """Logging decision for one completion event."""

    SLOW = "Slow"
    SUCCESS = "Success"
    ERROR = "Error"
    SUPPRESSED = "Suppressed"

    @property
    def tag(self) -> str:
        """Outcome tag written into the log line, e.g. ``[Slow]``."""
        if self is Classification.SUPPRESSED:
            raise PreconditionViolationError("classification", self, "suppressed events have no tag")
        return f"[{self.value}]"

    @property
    def severity(self) -> Severity:
        if self is Classification.SUPPRESSED:
            raise PreconditionViolationError("classification", self, "suppressed events have no severity")
        return Severity.ERROR if self is Classification.ERROR else Severity.INFO


def classify(event: CompletionEvent, policy: LoggingPolicy) -> Classification:
    """Return the :class:`Classification` of *event* under *policy*."""
    match event:
        case NodeSuccessEvent() | NodeErrorEvent():
            # node-level outcomes carry no logging policy of their own
            return Classification.SUPPRESSED
        case SuccessEvent():
            return _classify_success(event.latency_nanos, policy)
        case ErrorEvent():
            return Classification.ERROR if policy.error_enabled else Classification.SUPPRESSED
        case _:
            raise PreconditionViolationError("event", event, "not a CompletionEvent variant")


def _classify_success(latency_nanos: int, policy: LoggingPolicy) -> Classification:
    success_enabled = policy.success_enabled
    slow_enabled = policy.slow_enabled
    if not success_enabled and not slow_enabled:
        return Classification.SUPPRESSED

    threshold = policy.slow_threshold_nanos
    require_non_negative("slow_threshold_nanos", threshold)
    is_slow = threshold is not None and latency_nanos > threshold
    if is_slow:
        return Classification.SLOW if slow_enabled else Classification.SUPPRESSED
    return Classification.SUCCESS if success_enabled else Classification.SUPPRESSED


__all__ = ["Classification", "classify"]
