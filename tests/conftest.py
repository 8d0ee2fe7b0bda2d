"""Pytest configuration and shared fixtures for upcloud tests."""

import os

import pytest

from upcloud import Context
from upcloud.testing import RecordingHandler


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear UpCloud and test-related environment variables before each test."""
    test_prefixes = ("TEST_", "UPCLOUD_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def ctx():
    return Context.background()


@pytest.fixture
def handler():
    """Handler answering every request with an empty 200."""
    return RecordingHandler()
