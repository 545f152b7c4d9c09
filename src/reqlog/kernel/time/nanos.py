"""Kernel time – nanosecond constants, conversion and formatting."""
from __future__ import annotations

from datetime import timedelta

from reqlog.kernel.errors import require_non_negative

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000 * NANOS_PER_MICRO
NANOS_PER_SECOND = 1_000 * NANOS_PER_MILLI
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE


def to_nanos(delta: timedelta) -> int:
    """Convert a :class:`~datetime.timedelta` to whole nanoseconds."""
    micros = (delta.days * 86_400 + delta.seconds) * 1_000_000 + delta.microseconds
    return micros * NANOS_PER_MICRO


def format_nanos(nanos: int) -> str:
    """Render *nanos* with the largest unit that keeps the value readable.

    Examples::

        format_nanos(512)               # '512 ns'
        format_nanos(42_000)            # '42 us'
        format_nanos(150_000_000)       # '150 ms'
        format_nanos(2_500_000_000)     # '2 s 500 ms'
        format_nanos(61 * 10**9)        # '1 mn 1 s'
        format_nanos(3_720 * 10**9)     # '1 h 2 mn'
    """
    require_non_negative("latency_nanos", nanos)
    if nanos >= NANOS_PER_HOUR:
        return f"{nanos // NANOS_PER_HOUR} h {nanos % NANOS_PER_HOUR // NANOS_PER_MINUTE} mn"
    if nanos >= NANOS_PER_MINUTE:
        return f"{nanos // NANOS_PER_MINUTE} mn {nanos % NANOS_PER_MINUTE // NANOS_PER_SECOND} s"
    if nanos >= NANOS_PER_SECOND:
        return f"{nanos // NANOS_PER_SECOND} s {nanos % NANOS_PER_SECOND // NANOS_PER_MILLI} ms"
    if nanos >= NANOS_PER_MILLI:
        return f"{nanos // NANOS_PER_MILLI} ms"
    if nanos >= NANOS_PER_MICRO:
        return f"{nanos // NANOS_PER_MICRO} us"
    return f"{nanos} ns"


__all__ = [
    "NANOS_PER_HOUR",
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "format_nanos",
    "to_nanos",
]
