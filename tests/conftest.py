"""Shared fixtures for unit and feature tests."""

from __future__ import annotations

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_ghactivity_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop GHACTIVITY_* variables so the caller's shell cannot leak in."""
    for name in list(os.environ):
        if name.startswith("GHACTIVITY_"):
            monkeypatch.delenv(name)
