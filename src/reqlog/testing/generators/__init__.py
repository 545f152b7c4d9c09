"""Testing generators – hypothesis strategies for completion events."""
from reqlog.testing.generators.strategies import (
    completion_event_strategy,
    error_event_strategy,
    request_strategy,
    success_event_strategy,
)

__all__ = [
    "completion_event_strategy",
    "error_event_strategy",
    "request_strategy",
    "success_event_strategy",
]
