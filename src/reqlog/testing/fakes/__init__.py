"""Testing fakes – in-memory doubles for the sink and configuration ports."""
from reqlog.testing.fakes.config import RecordingConfigProfile, make_profile
from reqlog.testing.fakes.sink import RecordingSink, SinkEntry

__all__ = [
    "RecordingConfigProfile",
    "RecordingSink",
    "SinkEntry",
    "make_profile",
]
