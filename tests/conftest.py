"""Shared fixtures for reqlog tests."""

from __future__ import annotations

import pytest

from reqlog.testing import RecordingSink


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink()
