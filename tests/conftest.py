# tests/conftest.py
import json

import pytest

from ethos.integration.http.client import HttpResponse


class FakeHttpClient:
    """Scripted HttpClient: routes by (method, url suffix), records calls."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def add(self, method, suffix, status_code, body=""):
        if not isinstance(body, str):
            body = json.dumps(body)
        self.routes[(method, suffix)] = (status_code, body)

    def calls_to(self, suffix):
        return [c for c in self.calls if c[1].endswith(suffix)]

    async def get(self, url, options):
        return self._respond("GET", url, options)

    async def post(self, url, options):
        return self._respond("POST", url, options)

    def _respond(self, method, url, options):
        self.calls.append((method, url, options))
        for (m, suffix), reply in self.routes.items():
            if m == method and url.endswith(suffix):
                if isinstance(reply, Exception):
                    raise reply
                status_code, body = reply
                return HttpResponse(status_code=status_code, body=body)
        raise AssertionError(f"Unexpected {method} {url}")



@pytest.fixture
def http_client():
    client = FakeHttpClient()
    client.add("POST", "/auth", 200, "tok123")
    return client


@pytest.fixture(autouse=True)
def no_env_root(monkeypatch):
    monkeypatch.delenv("ETHOS_INTEGRATION_URL", raising=False)
