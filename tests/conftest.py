import os

os.environ.setdefault("OPENAI_API_KEY", "sk-test")

import pytest
from fastapi.testclient import TestClient

from newsbrief_api.app import app
from newsbrief_api.deps import get_news_client
from newsbrief_core import ProviderError


class FakeNewsClient:
    """Stands in for NewsClient: canned reply text, or a canned ProviderError."""

    mode = "chat"

    def __init__(self, raw=None, error=None, search_text=None):
        self.raw = raw
        self.error = error
        self.search_text = search_text
        self.calls = []

    def fetch_raw_news(self, topic, offset=0):
        self.calls.append((topic, offset))
        if self.error is not None:
            raise self.error
        return self.raw

    def search(self, query):
        self.calls.append((query, None))
        if self.error is not None:
            raise self.error
        return self.search_text


@pytest.fixture
def fake_client():
    return FakeNewsClient


@pytest.fixture
def api():
    """Factory: api(fake) -> TestClient with the provider swapped for fake."""

    def _make(fake):
        app.dependency_overrides[get_news_client] = lambda: fake
        return TestClient(app)

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture
def provider_down():
    return ProviderError("LLM request failed: Connection error.")
