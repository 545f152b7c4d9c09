"""Config – request logger option keys."""
from __future__ import annotations

from enum import Enum


class RequestLoggerOption(str, Enum):
    """Configuration keys read by :class:`~reqlog.tracker.RequestLogger`.

    Keys follow the driver's ``advanced.request-tracker.logs`` namespace so a
    profile can be populated straight from the driver configuration tree.
    """

    SUCCESS_ENABLED = "advanced.request-tracker.logs.success.enabled"
    SLOW_ENABLED = "advanced.request-tracker.logs.slow.enabled"
    SLOW_THRESHOLD = "advanced.request-tracker.logs.slow.threshold"
    ERROR_ENABLED = "advanced.request-tracker.logs.error.enabled"
    MAX_QUERY_LENGTH = "advanced.request-tracker.logs.max-query-length"
    SHOW_VALUES = "advanced.request-tracker.logs.show-values"
    MAX_VALUES = "advanced.request-tracker.logs.max-values"
    MAX_VALUE_LENGTH = "advanced.request-tracker.logs.max-value-length"
    SHOW_STACK_TRACES = "advanced.request-tracker.logs.show-stack-traces"

    def __str__(self) -> str:
        return self.value


__all__ = ["RequestLoggerOption"]
