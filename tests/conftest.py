"""Shared fixtures for WordLens tests."""

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from wordlens.config import Settings
from wordlens.server import create_app


@pytest.fixture
def respect_text() -> str:
    """Sample text with two differently-cased occurrences of 'respect'."""
    return "Respect and inclusion matter. Inclusion drives respect."


@pytest.fixture
def make_keyword():
    """Factory for keyword-like objects (word and color)."""

    def _make(word: str, color: str = "#fbbf24"):
        return SimpleNamespace(word=word, color=color)

    return _make


@pytest.fixture
def test_settings() -> Settings:
    """Settings with limits generous enough for a test run."""
    return Settings(
        debug=True,
        ip_rate_limit_requests=1000,
        read_timeout_seconds=5.0,
        max_visible_lines=100,
    )


@pytest.fixture
def client(test_settings):
    """Test client for a freshly built application."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client
