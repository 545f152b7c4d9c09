"""Tracker – RequestTracker port, no-op and multiplexing implementations."""
from __future__ import annotations

import abc
from typing import Any

from reqlog.config import ConfigProfile
from reqlog.kernel.errors import PreconditionViolationError
from reqlog.observability.logging import get_logger
from reqlog.tracker.events import (
    CompletionEvent,
    ErrorEvent,
    Node,
    NodeErrorEvent,
    NodeSuccessEvent,
    Request,
    SuccessEvent,
)

_log = get_logger(__name__)


class RequestTracker(abc.ABC):
    """Port: observer notified of every request (and node attempt) outcome.

    Implementations are invoked synchronously from whichever thread
    completes the request and must be thread-safe.
    """

    @abc.abstractmethod
    def on_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None: ...

    @abc.abstractmethod
    def on_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node | None = None,
    ) -> None: ...

    @abc.abstractmethod
    def on_node_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None: ...

    @abc.abstractmethod
    def on_node_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node,
    ) -> None: ...

    def on_completion(self, event: CompletionEvent, profile: ConfigProfile) -> None:
        """Dispatch *event* to the callback matching its variant."""
        match event:
            case NodeSuccessEvent():
                self.on_node_success(event.request, event.latency_nanos, profile, event.node)
            case NodeErrorEvent():
                self.on_node_error(event.request, event.error, event.latency_nanos, profile, event.node)
            case SuccessEvent():
                self.on_success(event.request, event.latency_nanos, profile, event.node)
            case ErrorEvent():
                self.on_error(event.request, event.error, event.latency_nanos, profile, event.node)
            case _:
                raise PreconditionViolationError("event", event, "not a CompletionEvent variant")

    def close(self) -> None:
        """Release resources held by the tracker."""


class NoopRequestTracker(RequestTracker):
    """Tracker that ignores every notification."""

    def on_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        pass

    def on_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node | None = None,
    ) -> None:
        pass

    def on_node_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        pass

    def on_node_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node,
    ) -> None:
        pass


class MultiplexingRequestTracker(RequestTracker):
    """Fan every notification out to several trackers, in registration order.

    A tracker that raises does not prevent the others from being notified:
    the failure is logged at ``WARNING`` level and the loop continues.
    :class:`PreconditionViolationError` is a caller bug and always propagates.
    """

    def __init__(self, *trackers: RequestTracker) -> None:
        self._trackers: list[RequestTracker] = list(trackers)

    @property
    def trackers(self) -> tuple[RequestTracker, ...]:
        return tuple(self._trackers)

    def register(self, tracker: RequestTracker) -> None:
        self._trackers.append(tracker)

    def _invoke(self, callback: str, *args: Any) -> None:
        for tracker in self._trackers:
            try:
                getattr(tracker, callback)(*args)
            except PreconditionViolationError:
                raise
            except Exception as exc:  # noqa: BLE001 – isolate trackers from each other
                _log.warning(
                    "request_tracker.callback_failed",
                    tracker=type(tracker).__name__,
                    callback=callback,
                    error=repr(exc),
                )

    def on_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        self._invoke("on_success", request, latency_nanos, profile, node)

    def on_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node | None = None,
    ) -> None:
        self._invoke("on_error", request, error, latency_nanos, profile, node)

    def on_node_success(self, request: Request, latency_nanos: int, profile: ConfigProfile, node: Node) -> None:
        self._invoke("on_node_success", request, latency_nanos, profile, node)

    def on_node_error(
        self,
        request: Request,
        error: BaseException,
        latency_nanos: int,
        profile: ConfigProfile,
        node: Node,
    ) -> None:
        self._invoke("on_node_error", request, error, latency_nanos, profile, node)

    def close(self) -> None:
        self._invoke("close")


__all__ = ["MultiplexingRequestTracker", "NoopRequestTracker", "RequestTracker"]
