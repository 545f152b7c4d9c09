"""Tracker – RequestLogFormatter.

Builds the single log line emitted for a classified completion event::

    [s0|10.0.0.1:9042] [Slow] (150 ms) [2 values] SELECT * FROM t WHERE k=? AND c=? [v0=42, v1='abc']

Unbounded user data (query text, bound values) is always cut to the
configured limits; error details are either summarised inline or handed
back for the sink to attach, never both.
"""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from itertools import islice
from typing import Any

from reqlog.kernel.errors import PreconditionViolationError, require_non_negative
from reqlog.kernel.time import format_nanos
from reqlog.observability.logging import Severity
from reqlog.tracker.classifier import Classification
from reqlog.tracker.events import CompletionEvent, ErrorEvent, NamedValues, Node, Request
from reqlog.tracker.policy import LoggingPolicy

TRUNCATED = "...<truncated>"
FURTHER_VALUES_TRUNCATED = "...<further values truncated>"
NO_NODE = "N/A"


@dataclasses.dataclass(frozen=True, slots=True)
class FormattedRecord:
    """A finished log line plus what the sink needs to emit it."""

    text: str
    severity: Severity
    attached_error: BaseException | None = None


def truncate(text: str, limit: int | None) -> str:
    """Cut *text* to *limit* characters and mark the cut.

    ``None`` means no limit. Text that already fits is returned unchanged.
    """
    require_non_negative("limit", limit)
    if limit is None or len(text) <= limit:
        return text
    return text[:limit] + TRUNCATED


def summarize_error(error: BaseException) -> str:
    """One-line ``Type: message`` summary of *error*."""
    message = " ".join(str(error).split())
    name = type(error).__name__
    return f"{name}: {message}" if message else name


def render_value(value: Any, max_length: int | None) -> str:
    """Render a bound value, truncating the raw text before quoting it."""
    require_non_negative("max_value_length", max_length)
    if value is None:
        return "NULL"
    quoted = False
    if isinstance(value, str):
        raw, quoted = value, True
    elif isinstance(value, bool):
        raw = "true" if value else "false"
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = "0x" + bytes(value).hex()
    else:
        raw = str(value)

    suffix = ""
    if max_length is not None and len(raw) > max_length:
        raw, suffix = raw[:max_length], TRUNCATED
    if quoted:
        raw = "'" + raw.replace("'", "''") + "'"
    return raw + suffix


class RequestLogFormatter:
    """Formats classified completion events into :class:`FormattedRecord` values.

    Stateless and safe to share between threads. The ``append_*`` steps are
    public so subclasses can change one part of the layout without
    re-implementing the rest.
    """

    def format(
        self,
        event: CompletionEvent,
        classification: Classification,
        policy: LoggingPolicy,
        prefix: str,
    ) -> FormattedRecord:
        if classification is Classification.SUPPRESSED:
            raise PreconditionViolationError("classification", classification, "suppressed events are not formatted")

        parts = self.log_builder(prefix, event.node)
        parts.append(classification.tag)
        self.append_latency(event.latency_nanos, parts)
        self.append_request(
            event.request,
            policy.max_query_length,
            policy.show_values,
            policy.max_values,
            policy.max_value_length,
            parts,
        )

        attached_error: BaseException | None = None
        if classification is Classification.ERROR:
            if not isinstance(event, ErrorEvent):
                raise PreconditionViolationError("event", event, "error classification requires an ErrorEvent")
            if policy.show_stack_traces:
                attached_error = event.error
            else:
                parts.append(f"[{summarize_error(event.error)}]")

        return FormattedRecord(" ".join(parts), classification.severity, attached_error)

    # ------------------------------------------------------------------
    # Layout steps
    # ------------------------------------------------------------------

    def log_builder(self, prefix: str, node: Node | None) -> list[str]:
        return [f"[{prefix}|{NO_NODE if node is None else node}]"]

    def append_latency(self, latency_nanos: int, parts: list[str]) -> None:
        parts.append(f"({format_nanos(latency_nanos)})")

    def append_request(
        self,
        request: Request,
        max_query_length: int,
        show_values: bool,
        max_values: int,
        max_value_length: int,
        parts: list[str],
    ) -> None:
        require_non_negative("max_query_length", max_query_length)
        values = request.values
        if len(values) > 0:
            parts.append(f"[{len(values)} values]")

        # a zero limit drops the query text altogether
        if max_query_length > 0:
            query = truncate(request.query, max_query_length)
            if query:
                parts.append(query)

        if show_values:
            require_non_negative("max_values", max_values)
            if max_values > 0 and len(values) > 0:
                self.append_values(values, max_values, max_value_length, parts)

    def append_values(
        self,
        values: Sequence[Any] | Mapping[str, Any] | NamedValues,
        max_values: int,
        max_value_length: int,
        parts: list[str],
    ) -> None:
        require_non_negative("max_value_length", max_value_length)
        if isinstance(values, (Mapping, NamedValues)):
            named = islice(values.items(), max_values)
        else:
            named = ((f"v{i}", value) for i, value in enumerate(islice(values, max_values)))
        rendered = ", ".join(f"{name}={render_value(value, max_value_length)}" for name, value in named)
        if len(values) > max_values:
            rendered += FURTHER_VALUES_TRUNCATED
        parts.append(f"[{rendered}]")


__all__ = [
    "FURTHER_VALUES_TRUNCATED",
    "FormattedRecord",
    "NO_NODE",
    "RequestLogFormatter",
    "TRUNCATED",
    "render_value",
    "summarize_error",
    "truncate",
]
