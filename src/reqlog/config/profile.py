"""Config – ConfigProfile port and a mapping-backed implementation."""
from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol, runtime_checkable

from reqlog.config.parsing import parse_bool, parse_duration, parse_int


@runtime_checkable
class ConfigProfile(Protocol):
    """Port: typed, total lookups into resolved driver configuration.

    Implementations never raise for absent or malformed values; they return
    *default* instead. Durations are expressed in nanoseconds.
    """

    def get_bool(self, key: str, default: bool) -> bool: ...
    def get_int(self, key: str, default: int) -> int: ...
    def get_duration(self, key: str, default: int | None) -> int | None: ...


class MappingConfigProfile:
    """Profile over a plain ``{key: raw_value}`` mapping.

    The mapping is read on every lookup and never copied, so updates made
    by its owner are picked up by the next completion event.

    Usage::

        profile = MappingConfigProfile({
            RequestLoggerOption.SUCCESS_ENABLED: "true",
            RequestLoggerOption.SLOW_THRESHOLD: "100 ms",
        })
        profile.get_duration(RequestLoggerOption.SLOW_THRESHOLD, None)  # 100_000_000
    """

    def __init__(self, values: MutableMapping[str, Any] | None = None) -> None:
        self._values: MutableMapping[str, Any] = values if values is not None else {}

    def _raw(self, key: str) -> Any:
        value = self._values.get(key)
        if value is None:
            # option enum members and their plain string keys are interchangeable
            value = self._values.get(str(key))
        return value

    def get_bool(self, key: str, default: bool) -> bool:
        value = parse_bool(self._raw(key))
        return default if value is None else value

    def get_int(self, key: str, default: int) -> int:
        value = parse_int(self._raw(key))
        return default if value is None else value

    def get_duration(self, key: str, default: int | None) -> int | None:
        value = parse_duration(self._raw(key))
        return default if value is None else value

    def set(self, key: str, value: Any) -> "MappingConfigProfile":
        """Set the raw value for *key*."""
        self._values[str(key)] = value
        return self

    def unset(self, key: str) -> "MappingConfigProfile":
        """Remove *key* so lookups fall back to their default."""
        self._values.pop(key, None)
        self._values.pop(str(key), None)
        return self

    def __repr__(self) -> str:
        return f"MappingConfigProfile({dict(self._values)!r})"


__all__ = ["ConfigProfile", "MappingConfigProfile"]
