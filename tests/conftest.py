"""Shared test fixtures."""

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep TEXTOPS_* variables from the host out of the tests."""
    for var in ("TEXTOPS_SEPARATOR", "TEXTOPS_LEGACY_COLOR_STRIP", "TEXTOPS_VERBOSE"):
        monkeypatch.delenv(var, raising=False)
