"""Smoke tests for the public package surface."""

from __future__ import annotations

import importlib

import pytest

import reqlog


def test_version() -> None:
    assert reqlog.__version__ == "0.1.0"


@pytest.mark.parametrize(
    "module",
    [
        "reqlog.config",
        "reqlog.kernel.errors",
        "reqlog.kernel.time",
        "reqlog.observability",
        "reqlog.observability.logging",
        "reqlog.testing",
        "reqlog.testing.generators",
        "reqlog.tracker",
    ],
)
def test_all_symbols_importable(module: str) -> None:
    mod = importlib.import_module(module)
    for name in mod.__all__:
        assert hasattr(mod, name), f"{name!r} missing from {module}"
