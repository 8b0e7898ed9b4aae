"""
Shared fixtures: the project root on sys.path, a clean FRONTAPP_* environment,
and a fake transport that stands in for requests.Session.send.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import requests

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never pick up real credentials or CA bundle overrides."""
    for name in (
        "FRONTAPP_API_KEY", "FRONTAPP_API_ENDPOINT", "FRONTAPP_TIMEOUT",
        "FRONTAPP_VERIFY_SSL", "FRONTAPP_LOG_LEVEL",
        "REQUESTS_CA_BUNDLE", "CURL_CA_BUNDLE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_response():
    """Build a real requests.Response without touching the network."""
    def _make(status=200, body="", headers=None):
        resp = requests.models.Response()
        resp.status_code = status
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
        resp.headers.update(headers or {"Content-Type": "application/json"})
        resp.encoding = "utf-8"
        resp.url = "https://api2.frontapp.com/"
        return resp
    return _make


@pytest.fixture
def fake_send(monkeypatch):
    """requests.Session.send replaced by a MagicMock; set return_value / side_effect."""
    send = MagicMock(name="Session.send")
    monkeypatch.setattr(requests.Session, "send", send)
    return send
