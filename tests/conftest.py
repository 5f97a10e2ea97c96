"""Pytest configuration and shared fixtures."""

import pytest


@pytest.fixture(autouse=True)
def isolated_shell(monkeypatch):
    """Keep tests away from the real shell history.

    SHELL is unset so history synchronization is a no-op unless a test
    sets it explicitly.
    """
    monkeypatch.delenv("SHELL", raising=False)
    monkeypatch.delenv("XCPICK_STRICT_HISTORY", raising=False)
    monkeypatch.delenv("XCPICK_REFRESH_COMMAND", raising=False)
