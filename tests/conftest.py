"""Shared fixtures: a fake ``requests.request`` and a configured client."""

import pytest
import requests

from pineconer import PineconeClient

from .helpers import ASSISTANT_HOST, CONTROL, INDEX_HOST, FakeHttp


@pytest.fixture
def http(monkeypatch):
    fake = FakeHttp()
    monkeypatch.setattr(requests, "request", fake)
    return fake


@pytest.fixture
def client():
    return PineconeClient(api_key="test-key")


@pytest.fixture
def index(http):
    """A described index named 'my-index'; returns its data-plane base URL."""
    http.add("GET", f"{CONTROL}/indexes/my-index", body={
        "name": "my-index",
        "dimension": 4,
        "metric": "cosine",
        "host": INDEX_HOST,
        "status": {"ready": True, "state": "Ready"},
    })
    return f"https://{INDEX_HOST}"


@pytest.fixture
def assistant(http):
    """A described assistant named 'helper'; returns its data-plane base URL."""
    http.add("GET", f"{CONTROL}/assistant/assistants/helper", body={
        "name": "helper",
        "status": "Ready",
        "host": f"https://{ASSISTANT_HOST}",
    })
    return f"https://{ASSISTANT_HOST}"
