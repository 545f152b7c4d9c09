"""Config – lenient coercion of raw configuration values.

Every function returns ``None`` when the raw value cannot be interpreted;
callers substitute their documented default.
"""
from __future__ import annotations

import math
import re
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from typing import Any

from reqlog.kernel.time import (
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    to_nanos,
)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})

_DURATION_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*([a-zA-Z]*)\s*$")

_UNITS: dict[str, int] = {}
for _names, _factor in (
    (("ns", "nano", "nanos", "nanosecond", "nanoseconds"), 1),
    (("us", "micro", "micros", "microsecond", "microseconds"), NANOS_PER_MICRO),
    (("", "ms", "milli", "millis", "millisecond", "milliseconds"), NANOS_PER_MILLI),
    (("s", "second", "seconds"), NANOS_PER_SECOND),
    (("m", "mn", "min", "minute", "minutes"), NANOS_PER_MINUTE),
    (("h", "hour", "hours"), NANOS_PER_HOUR),
    (("d", "day", "days"), 24 * NANOS_PER_HOUR),
):
    for _name in _names:
        _UNITS[_name] = _factor


def parse_bool(raw: Any) -> bool | None:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        value = raw.strip().lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    return None


def parse_int(raw: Any) -> int | None:
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            return None
    return None


def parse_duration(raw: Any) -> int | None:
    """Return *raw* as whole nanoseconds.

    Bare numbers are milliseconds, the same convention HOCON driver
    configuration files use.
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, timedelta):
        return to_nanos(raw)
    if isinstance(raw, float) and not math.isfinite(raw):
        return None
    if isinstance(raw, (int, float)):
        return int(Decimal(str(raw)) * NANOS_PER_MILLI)
    if not isinstance(raw, str):
        return None
    match = _DURATION_RE.match(raw)
    if match is None:
        return None
    number, unit = match.groups()
    factor = _UNITS.get(unit.lower())
    if factor is None:
        return None
    try:
        return int(Decimal(number) * factor)
    except InvalidOperation:
        return None


__all__ = ["parse_bool", "parse_duration", "parse_int"]
