"""Kernel time – nanosecond units and human-scaled duration rendering."""
from reqlog.kernel.time.nanos import (
    NANOS_PER_HOUR,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
    format_nanos,
    to_nanos,
)

__all__ = [
    "NANOS_PER_HOUR",
    "NANOS_PER_MICRO",
    "NANOS_PER_MILLI",
    "NANOS_PER_MINUTE",
    "NANOS_PER_SECOND",
    "format_nanos",
    "to_nanos",
]
