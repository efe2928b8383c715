# ethos/integration/http/client.py
"""
HTTP client capability used by the token manager and operation wrappers.

Anything with async ``get``/``post`` methods returning an
:class:`HttpResponse` can be injected. :class:`HttpxClient` is the default.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

import httpx

from ethos.integration.core.config import Settings
from ethos.integration.http.options import RequestOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str

    def json(self) -> Any:
        return json.loads(self.body)


class HttpClient(Protocol):
    """Transport contract.

    Implementations return the response for every status code and raise
    only on transport failures (connect errors, timeouts, ...).
    """

    async def get(self, url: str, options: RequestOptions) -> HttpResponse: ...

    async def post(self, url: str, options: RequestOptions) -> HttpResponse: ...


class HttpxClient:
    """Default :class:`HttpClient` backed by ``httpx.AsyncClient``.

    A client is opened per request; nothing is pooled across calls.
    """

    def __init__(
        self,
        *,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout if timeout is not None else Settings().ethos_http_timeout
        self._transport = transport

    async def get(self, url: str, options: RequestOptions) -> HttpResponse:
        return await self._send("GET", url, options)

    async def post(self, url: str, options: RequestOptions) -> HttpResponse:
        return await self._send("POST", url, options)

    async def _send(self, method: str, url: str, options: RequestOptions) -> HttpResponse:
        kwargs: dict[str, Any] = {"headers": options.headers}
        if options.search_params:
            kwargs["params"] = options.search_params
        if options.json is not None:
            kwargs["json"] = options.json

        async with httpx.AsyncClient(
            timeout=self._timeout, transport=self._transport
        ) as client:
            resp = await client.request(method, url, **kwargs)

        logger.debug("%s %s -> %s", method, url, resp.status_code)
        return HttpResponse(status_code=resp.status_code, body=resp.text)
