import json

import pytest
import requests

from places_autocomplete.http_client import HttpClient


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Records every GET and answers from a queue of responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append({"url": url, "timeout": timeout})
        resp = self.responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp

    def close(self):
        self.closed = True


@pytest.fixture
def make_client():
    def _make(*responses):
        session = FakeSession(*responses)
        return HttpClient(timeout_sec=5, session=session), session

    return _make


@pytest.fixture
def ok():
    def _ok(payload):
        return FakeResponse(200, payload)

    return _ok


@pytest.fixture
def connection_error():
    return requests.ConnectionError("connection refused")


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def fake_session():
    return FakeSession
