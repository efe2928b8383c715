# ethos/integration/auth/tokens.py
"""
Bearer token resolution.

Ethos exchanges an API key for a short-lived JWT: the key itself is sent
as the bearer credential in a POST to ``{root}/auth`` and the raw response
body is the token.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass

from ethos.integration.auth.models import CachedToken
from ethos.integration.core.context import IntegrationContext
from ethos.integration.core.errors import AuthenticationError, InvalidArgument
from ethos.integration.http.client import HttpClient, HttpxClient
from ethos.integration.http.options import add_authorization, create_request_options
from ethos.integration.http.urls import build_url

logger = logging.getLogger(__name__)


@dataclass
class TokenResult:
    context: IntegrationContext
    token: str


async def get_token(
    *,
    api_key: str | None = None,
    context: IntegrationContext | None = None,
    integration_url: str | None = None,
    token: str | None = None,
    http_client: HttpClient | None = None,
) -> TokenResult:
    """Return a usable bearer token for ``api_key``.

    Resolution order:

    1. an explicitly supplied ``token`` (no caching, no network);
    2. an unexpired token cached on ``context`` for ``api_key``;
    3. a new exchange with the provider, cached on ``context``.

    Raises:
        InvalidArgument: No cached token and no ``api_key`` to exchange.
        AuthenticationError: The exchange returned a non-200 status.
    """
    if context is None:
        context = IntegrationContext()

    if token:
        return TokenResult(context=context, token=token)

    now = time.time()
    cached = context.cached_token(api_key)
    if cached and cached.is_valid(now):
        logger.debug("using cached token")
        return TokenResult(context=context, token=cached.token)

    if not api_key:
        raise InvalidArgument("get_token missing api_key")

    options = create_request_options()
    add_authorization(api_key, options)
    url = build_url(base="auth", integration_url=integration_url)

    client = http_client or HttpxClient()
    logger.debug("requesting a new token")
    response = await client.post(url, options)

    if response.status_code == 200:
        issued = CachedToken.issued(response.body, now)
        context.store_token(api_key, issued)
        return TokenResult(context=context, token=issued.token)

    raise AuthenticationError(
        f"Integration Auth failed. response status: {response.status_code}",
        status_code=response.status_code,
    )
