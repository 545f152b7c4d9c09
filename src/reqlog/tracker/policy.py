"""Tracker – LoggingPolicy, a per-event view over live configuration."""
from __future__ import annotations

from functools import cached_property

from reqlog.config import ConfigProfile, RequestLoggerOption

DEFAULT_MAX_QUERY_LENGTH = 500
DEFAULT_MAX_VALUES = 0
DEFAULT_MAX_VALUE_LENGTH = 0


class LoggingPolicy:
    """Request logging settings resolved from a :class:`ConfigProfile`.

    Build one per completion event and discard it afterwards: configuration
    can change between events, so nothing is cached beyond the view itself.
    Every setting is read lazily, on first access, so a disabled fast path
    never touches the settings it does not need.

    An absent or unparseable setting resolves to its default; a
    ``slow_threshold_nanos`` of ``None`` means no request is ever slow.
    """

    def __init__(self, profile: ConfigProfile) -> None:
        self._profile = profile

    @property
    def profile(self) -> ConfigProfile:
        return self._profile

    @cached_property
    def success_enabled(self) -> bool:
        return self._profile.get_bool(RequestLoggerOption.SUCCESS_ENABLED, False)

    @cached_property
    def slow_enabled(self) -> bool:
        return self._profile.get_bool(RequestLoggerOption.SLOW_ENABLED, False)

    @cached_property
    def slow_threshold_nanos(self) -> int | None:
        return self._profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None)

    @cached_property
    def error_enabled(self) -> bool:
        return self._profile.get_bool(RequestLoggerOption.ERROR_ENABLED, False)

    @cached_property
    def max_query_length(self) -> int:
        return self._profile.get_int(RequestLoggerOption.MAX_QUERY_LENGTH, DEFAULT_MAX_QUERY_LENGTH)

    @cached_property
    def show_values(self) -> bool:
        return self._profile.get_bool(RequestLoggerOption.SHOW_VALUES, False)

    @cached_property
    def max_values(self) -> int:
        return self._profile.get_int(RequestLoggerOption.MAX_VALUES, DEFAULT_MAX_VALUES)

    @cached_property
    def max_value_length(self) -> int:
        return self._profile.get_int(RequestLoggerOption.MAX_VALUE_LENGTH, DEFAULT_MAX_VALUE_LENGTH)

    @cached_property
    def show_stack_traces(self) -> bool:
        return self._profile.get_bool(RequestLoggerOption.SHOW_STACK_TRACES, False)

    def __repr__(self) -> str:
        return f"LoggingPolicy(profile={self._profile!r})"


__all__ = [
    "DEFAULT_MAX_QUERY_LENGTH",
    "DEFAULT_MAX_VALUES",
    "DEFAULT_MAX_VALUE_LENGTH",
    "LoggingPolicy",
]
