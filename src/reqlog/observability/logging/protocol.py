"""Observability – Logger protocol and Severity."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol


class Severity(str, Enum):
    """Severity of an emitted request log record.

    The value is the name of the logger method that emits it.
    """

    INFO = "info"
    ERROR = "error"

    @property
    def level(self) -> int:
        """Matching :mod:`logging` level number."""
        return logging.INFO if self is Severity.INFO else logging.ERROR


class Logger(Protocol):
    """Minimal logger protocol – works with structlog or stdlib."""

    def info(self, event: str, *args: Any, **kw: Any) -> Any: ...
    def warning(self, event: str, *args: Any, **kw: Any) -> Any: ...
    def error(self, event: str, *args: Any, **kw: Any) -> Any: ...


__all__ = ["Logger", "Severity"]
