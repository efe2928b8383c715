# tests/auth/test_tokens.py
import time

import httpx
import pytest

from ethos.integration.auth import tokens
from ethos.integration.auth.models import CachedToken
from ethos.integration.auth.tokens import get_token
from ethos.integration.core.context import IntegrationContext
from ethos.integration.core.errors import AuthenticationError, InvalidArgument

ROOT = "http://ethos.test"
NOW = 1_700_000_000.0


@pytest.fixture
def frozen_clock(monkeypatch):
    monkeypatch.setattr(tokens.time, "time", lambda: NOW)
    return NOW


@pytest.mark.asyncio
async def test_cache_hit_skips_network(http_client, frozen_clock):
    context = IntegrationContext()
    context.tokens_by_api_key["key1"] = CachedToken("cached", expires=NOW + 31)

    result = await get_token(api_key="key1", context=context, integration_url=ROOT, http_client=http_client)

    assert result.token == "cached"
    assert result.context is context
    assert http_client.calls == []


@pytest.mark.asyncio
async def test_cache_miss_exchanges_and_caches(http_client, frozen_clock):
    context = IntegrationContext()

    result = await get_token(api_key="key1", context=context, integration_url=ROOT, http_client=http_client)

    assert result.token == "tok123"
    assert context.tokens_by_api_key["key1"] == CachedToken("tok123", expires=NOW + 300)
    assert len(http_client.calls) == 1
    method, url, options = http_client.calls[0]
    assert (method, url) == ("POST", f"{ROOT}/auth")
    assert options.headers["Authorization"] == "Bearer key1"
    assert options.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_token_expiring_within_leeway_is_refreshed(http_client, frozen_clock):
    context = IntegrationContext()
    context.tokens_by_api_key["key1"] = CachedToken("stale", expires=NOW + 30)

    result = await get_token(api_key="key1", context=context, integration_url=ROOT, http_client=http_client)

    assert result.token == "tok123"
    assert context.tokens_by_api_key["key1"].token == "tok123"
    assert len(http_client.calls_to("/auth")) == 1


@pytest.mark.asyncio
async def test_cache_is_keyed_by_api_key(http_client, frozen_clock):
    context = IntegrationContext()
    context.tokens_by_api_key["key1"] = CachedToken("cached", expires=NOW + 300)

    result = await get_token(api_key="key2", context=context, integration_url=ROOT, http_client=http_client)

    assert result.token == "tok123"
    assert set(context.tokens_by_api_key) == {"key1", "key2"}


@pytest.mark.asyncio
async def test_explicit_token_bypasses_everything(http_client):
    context = IntegrationContext()

    result = await get_token(token="given", context=context, http_client=http_client)

    assert result.token == "given"
    assert context.tokens_by_api_key == {}
    assert http_client.calls == []


@pytest.mark.asyncio
async def test_missing_context_creates_one(http_client):
    result = await get_token(api_key="key1", integration_url=ROOT, http_client=http_client)

    assert isinstance(result.context, IntegrationContext)
    assert result.context.tokens_by_api_key["key1"].token == "tok123"


@pytest.mark.asyncio
async def test_missing_api_key_raises(http_client):
    with pytest.raises(InvalidArgument, match="missing api_key"):
        await get_token(context=IntegrationContext(), integration_url=ROOT, http_client=http_client)

    assert http_client.calls == []


@pytest.mark.asyncio
async def test_auth_failure_raises_with_status(http_client):
    http_client.add("POST", "/auth", 401, "unauthorized")
    context = IntegrationContext()

    with pytest.raises(AuthenticationError) as exc:
        await get_token(api_key="bad", context=context, integration_url=ROOT, http_client=http_client)

    assert exc.value.status_code == 401
    assert "bad" not in context.tokens_by_api_key


@pytest.mark.asyncio
async def test_default_client_uses_httpx(monkeypatch):
    calls = []

    async def handler(request: httpx.Request):
        calls.append((request.method, str(request.url), request.headers["Authorization"]))
        return httpx.Response(200, text="jwt-from-httpx")

    transport = httpx.MockTransport(handler)
    real_client = httpx.AsyncClient

    monkeypatch.setattr(
        httpx,
        "AsyncClient",
        lambda **kw: real_client(**{**kw, "transport": transport}),
    )
    monkeypatch.setenv("ETHOS_INTEGRATION_URL", ROOT)

    result = await get_token(api_key="key1")

    assert result.token == "jwt-from-httpx"
    assert calls == [("POST", f"{ROOT}/auth", "Bearer key1")]


def test_cached_token_validity_uses_leeway():
    now = time.time()

    assert CachedToken("t", expires=now + 60).is_valid(now)
    assert not CachedToken("t", expires=now + 30).is_valid(now)
    assert not CachedToken("t", expires=now - 1).is_valid(now)
