"""Testing support – fakes and hypothesis strategies for request logging.

Use in tests::

    from reqlog.testing import RecordingSink, make_profile
"""

from reqlog.testing.fakes import RecordingConfigProfile, RecordingSink, SinkEntry, make_profile

__all__ = [
    "RecordingConfigProfile",
    "RecordingSink",
    "SinkEntry",
    "make_profile",
]
