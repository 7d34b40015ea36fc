"""Pytest configuration for shapecheck tests."""

import pytest

from shapecheck.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test settings read from a clean environment."""
    monkeypatch.delenv("SHAPECHECK_MAX_DEPTH", raising=False)
    reset_settings()
    yield
    reset_settings()
