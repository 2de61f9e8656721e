"""
Test Configuration and Fixtures
===============================

Shared pytest fixtures and configuration for all tests.
"""

from unittest.mock import MagicMock

import pytest

from caption_summarizer import CaptionFragment, Orchestrator, Success, get_settings

SAMPLE_URL = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
SAMPLE_VIDEO_ID = "dQw4w9WgXcQ"


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests (no external dependencies)")


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch, tmp_path):
    """Clear cached settings and server-side keys so each test sees its own environment."""
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "TRANSCRIPT_LANGUAGE", "GEMINI_SUMMARY_MODEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer .env out of the way
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_fragments():
    """Caption fragments in spoken order."""
    return [
        CaptionFragment(text="皆さんこんにちは", start=0.0, duration=1.5),
        CaptionFragment(text="今日は予算について話します", start=1.5, duration=2.0),
        CaptionFragment(text="スケジュールも確認します", start=3.5, duration=2.0),
    ]


@pytest.fixture
def mock_fetcher(sample_fragments):
    """Transcript fetcher returning the sample fragments."""
    return MagicMock(return_value=Success(value=sample_fragments))


@pytest.fixture
def mock_summarizer():
    """Summarizer returning a fixed summary."""
    return MagicMock(return_value=Success(value="予算とスケジュールについての要約"))


@pytest.fixture
def orchestrator(mock_fetcher, mock_summarizer):
    """Orchestrator wired to mocked collaborators."""
    return Orchestrator(fetcher=mock_fetcher, summarizer=mock_summarizer, transcript_language="ja")


@pytest.fixture
def client(orchestrator):
    """FastAPI test client with both orchestrator dependencies replaced by the mocked one."""
    from fastapi.testclient import TestClient

    from app import app
    from routes.sessions import get_page_orchestrator
    from routes.summarize import new_orchestrator

    app.dependency_overrides[get_page_orchestrator] = lambda: orchestrator
    app.dependency_overrides[new_orchestrator] = lambda: orchestrator
    yield TestClient(app)
    app.dependency_overrides.clear()
