"""
Pytest configuration for gallery search tests.

No test touches the network: upstream and backend calls are replaced with
FakeResponse objects through monkeypatching requests.get.
"""

import pytest
import requests

from gallery_api import config as api_config

API_KEY = "secret-key-123"
BASE_URL = "https://api.harvardartmuseums.org"


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200):
        self._payload = payload
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class RecordingGet:
    """Callable replacing requests.get that records calls and replays a response."""

    def __init__(self, response=None, error=None):
        self.response = response if response is not None else FakeResponse({})
        self.error = error
        self.calls = []

    def __call__(self, url, params=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last_url(self):
        return self.calls[-1]["url"]


@pytest.fixture(autouse=True)
def upstream_config(monkeypatch):
    """Pin the upstream settings regardless of the developer's .env file."""
    monkeypatch.setattr(api_config, "BASE_URL", BASE_URL)
    monkeypatch.setattr(api_config, "API_KEY", API_KEY)
    monkeypatch.setattr(api_config, "UPSTREAM_TIMEOUT", 5.0)


@pytest.fixture
def search_payload():
    return {
        "info": {
            "totalrecordsperquery": 12,
            "totalrecords": 240,
            "pages": 20,
            "page": 1,
            "next": f"{BASE_URL}/object?apikey={API_KEY}&size=12&medium=2028390&page=2",
            "prev": f"{BASE_URL}/object?apikey={API_KEY}&size=12&medium=2028390&page=0",
        },
        "records": [
            {"id": 299843, "title": "Self-Portrait Dedicated to Paul Gauguin", "dated": "1888"},
            {"id": 228231, "title": "Still Life", "dated": "1910"},
        ],
    }
