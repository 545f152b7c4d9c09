"""Testing fakes – RecordingConfigProfile and make_profile."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

from reqlog.config import MappingConfigProfile, RequestLoggerOption

_POLICY_KEYS: dict[str, RequestLoggerOption] = {
    "success_enabled": RequestLoggerOption.SUCCESS_ENABLED,
    "slow_enabled": RequestLoggerOption.SLOW_ENABLED,
    "slow_threshold": RequestLoggerOption.SLOW_THRESHOLD,
    "error_enabled": RequestLoggerOption.ERROR_ENABLED,
    "max_query_length": RequestLoggerOption.MAX_QUERY_LENGTH,
    "show_values": RequestLoggerOption.SHOW_VALUES,
    "max_values": RequestLoggerOption.MAX_VALUES,
    "max_value_length": RequestLoggerOption.MAX_VALUE_LENGTH,
    "show_stack_traces": RequestLoggerOption.SHOW_STACK_TRACES,
}


class RecordingConfigProfile(MappingConfigProfile):
    """:class:`MappingConfigProfile` that remembers which keys were looked up.

    Lets tests assert that a disabled fast path never reads the settings it
    does not need.
    """

    def __init__(self, values: MutableMapping[str, Any] | None = None) -> None:
        super().__init__(values)
        self.reads: list[str] = []

    def get_bool(self, key: str, default: bool) -> bool:
        self.reads.append(str(key))
        return super().get_bool(key, default)

    def get_int(self, key: str, default: int) -> int:
        self.reads.append(str(key))
        return super().get_int(key, default)

    def get_duration(self, key: str, default: int | None) -> int | None:
        self.reads.append(str(key))
        return super().get_duration(key, default)

    def reset_reads(self) -> None:
        self.reads.clear()


def make_profile(**settings: Any) -> MappingConfigProfile:
    """Build a profile keyed by policy attribute names.

    Example::

        make_profile(success_enabled=True, slow_threshold="100 ms")
    """
    unknown = set(settings) - set(_POLICY_KEYS)
    if unknown:
        raise TypeError(f"unknown request logger settings: {sorted(unknown)}")
    return MappingConfigProfile({str(_POLICY_KEYS[name]): value for name, value in settings.items()})


__all__ = ["RecordingConfigProfile", "make_profile"]
