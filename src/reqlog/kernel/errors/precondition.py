"""Precondition violations — caller contract breaches, never recovered from."""

from __future__ import annotations

from typing import Any

from reqlog.kernel.errors.base import ReqlogError


class PreconditionViolationError(ReqlogError):
    """A caller passed malformed input (negative latency or limit, missing reference).

    These are programming errors: they always propagate and are never
    coerced into a valid value.
    """

    default_code = "precondition_violation"

    def __init__(self, argument: str, value: Any, reason: str) -> None:
        super().__init__(
            f"Invalid {argument}={value!r}: {reason}",
            detail={"argument": argument, "value": repr(value)},
        )
        self.argument = argument
        self.value = value
        self.reason = reason


def require_non_negative(argument: str, value: int | None) -> None:
    """Raise :class:`PreconditionViolationError` unless *value* is ``None`` or a non-negative int."""
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int):
        raise PreconditionViolationError(argument, value, "must be an integer")
    if value < 0:
        raise PreconditionViolationError(argument, value, "must not be negative")


__all__ = ["PreconditionViolationError", "require_non_negative"]
