"""Shared fixtures: a stand-in for the Fleep webhook endpoint."""

import http.client
import io
import urllib.error

import pytest

from fleep_notify import client

HOOK_URL = "https://fleep.io/hook/abc"


class TruncatedBody(io.BytesIO):
    """Body that ends before its announced Content-Length."""

    def read(self, *args):
        partial = super().read(*args)
        raise http.client.IncompleteRead(partial, 48)


class FakeResponse(io.BytesIO):
    def __init__(self, status: int, body: bytes) -> None:
        super().__init__(body)
        self.status = status


class TruncatedResponse(TruncatedBody):
    def __init__(self, status: int, body: bytes) -> None:
        super().__init__(body)
        self.status = status


class FakeFleep:
    """Replaces ``urlopen`` and answers every POST with a canned reply."""

    def __init__(self) -> None:
        self.url = HOOK_URL
        self.status = 200
        self.body = "ok"
        self.truncated = False
        self.requests: list[dict] = []
        self.responses: list[io.BytesIO] = []

    def respond(self, status: int, body: str, truncated: bool = False) -> None:
        self.status = status
        self.body = body
        self.truncated = truncated

    def urlopen(self, req, **kwargs):
        self.requests.append({
            "url": req.full_url,
            "method": req.get_method(),
            "headers": dict(req.header_items()),
            "body": req.data,
            "timeout": kwargs.get("timeout"),
        })
        data = self.body.encode("utf-8")
        if 200 <= self.status < 300:
            response_class = TruncatedResponse if self.truncated else FakeResponse
            response = response_class(self.status, data)
            self.responses.append(response)
            return response
        fp = TruncatedBody(data) if self.truncated else io.BytesIO(data)
        self.responses.append(fp)
        raise urllib.error.HTTPError(req.full_url, self.status, "error", {}, fp)


@pytest.fixture
def fleep_server(monkeypatch):
    fake = FakeFleep()
    monkeypatch.setattr(client.urllib.request, "urlopen", fake.urlopen)
    return fake
