"""Tracker – requests, nodes and completion events.

A :class:`CompletionEvent` is offered to the request logger once per
finished request. The four concrete variants form a closed tagged union::

    CompletionEvent
    ├── SuccessEvent        request-scoped success
    ├── ErrorEvent          request-scoped failure (carries ``error``)
    ├── NodeSuccessEvent    node-scoped success
    └── NodeErrorEvent      node-scoped failure (carries ``error``)
"""
from __future__ import annotations

import dataclasses
from collections.abc import Iterator, Mapping, Sequence
from typing import Any, ClassVar, Protocol, runtime_checkable

from reqlog.kernel.errors import PreconditionViolationError, require_non_negative


@runtime_checkable
class Request(Protocol):
    """Port: what the request logger needs to know about a request."""

    @property
    def query(self) -> str: ...

    @property
    def values(self) -> Sequence[Any] | Mapping[str, Any] | NamedValues: ...


@runtime_checkable
class Node(Protocol):
    """Port: anything with a printable identity (address, host id, …)."""

    def __str__(self) -> str: ...


class NamedValues(tuple):
    """Ordered ``(name, value)`` pairs.

    Unlike a mapping, a name may appear more than once, so every bound
    value of a batch keeps its own entry.
    """

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(self)


@dataclasses.dataclass(frozen=True, slots=True)
class Endpoint:
    """A ``host:port`` node address."""

    host: str
    port: int = 9042

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclasses.dataclass(frozen=True)
class SimpleRequest:
    """A single query with optional positional or named bound values."""

    query: str
    values: Sequence[Any] | Mapping[str, Any] = ()


@dataclasses.dataclass(frozen=True)
class BatchRequest:
    """A batch of :class:`SimpleRequest` statements executed together."""

    statements: Sequence[SimpleRequest]
    kind: str = "LOGGED"

    _KINDS: ClassVar[frozenset[str]] = frozenset({"LOGGED", "UNLOGGED", "COUNTER"})

    def __post_init__(self) -> None:
        if self.kind not in self._KINDS:
            raise PreconditionViolationError("kind", self.kind, f"must be one of {sorted(self._KINDS)}")

    @property
    def query(self) -> str:
        head = "BEGIN BATCH" if self.kind == "LOGGED" else f"BEGIN {self.kind} BATCH"
        body = " ".join(f"{statement.query};" for statement in self.statements)
        return f"{head} {body} APPLY BATCH" if body else f"{head} APPLY BATCH"

    @property
    def values(self) -> NamedValues:
        """Bound values of every statement, in order.

        Positional values are renumbered ``v0``, ``v1``, … across the whole
        batch; named values keep their names, repeated or not.
        """
        pairs: list[tuple[str, Any]] = []
        position = 0
        for statement in self.statements:
            if isinstance(statement.values, Mapping):
                pairs.extend(statement.values.items())
                continue
            for value in statement.values:
                pairs.append((f"v{position}", value))
                position += 1
        return NamedValues(pairs)


@dataclasses.dataclass(frozen=True, slots=True)
class CompletionEvent:
    """Base of the completion event union; use one of the four variants."""

    request: Request
    latency_nanos: int
    node: Node | None

    def __post_init__(self) -> None:
        if self.request is None:
            raise PreconditionViolationError("request", None, "is required")
        require_non_negative("latency_nanos", self.latency_nanos)


@dataclasses.dataclass(frozen=True, slots=True)
class SuccessEvent(CompletionEvent):
    """The request completed successfully."""


@dataclasses.dataclass(frozen=True, slots=True)
class NodeSuccessEvent(CompletionEvent):
    """A single node answered successfully on behalf of a request."""


@dataclasses.dataclass(frozen=True, slots=True)
class ErrorEvent(CompletionEvent):
    """The request failed; ``node`` is ``None`` when no node was tried."""

    error: BaseException

    def __post_init__(self) -> None:
        super(ErrorEvent, self).__post_init__()
        if self.error is None:
            raise PreconditionViolationError("error", None, "is required")


@dataclasses.dataclass(frozen=True, slots=True)
class NodeErrorEvent(CompletionEvent):
    """A single node failed on behalf of a request."""

    error: BaseException

    def __post_init__(self) -> None:
        super(NodeErrorEvent, self).__post_init__()
        if self.error is None:
            raise PreconditionViolationError("error", None, "is required")


__all__ = [
    "BatchRequest",
    "CompletionEvent",
    "Endpoint",
    "ErrorEvent",
    "NamedValues",
    "Node",
    "NodeErrorEvent",
    "NodeSuccessEvent",
    "Request",
    "SimpleRequest",
    "SuccessEvent",
]
