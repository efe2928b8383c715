# ethos/integration/operations.py
"""
Authenticated Ethos operations.

Each wrapper resolves a token, builds fresh request options, computes the
target URL and interprets the status code. Failure handling differs per
operation:

- ``get``/``post`` return an :class:`IntegrationResult` with ``error`` set
  for non-success statuses and transport failures;
- ``graphql`` raises :class:`IntegrationError`;
- token resolution failures always raise, for every operation.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from ethos.integration.auth.tokens import get_token
from ethos.integration.core.context import IntegrationContext
from ethos.integration.core.errors import (
    AuthenticationError,
    IntegrationError,
    InvalidArgument,
    RequestFailed,
)
from ethos.integration.core.logging import mask_token
from ethos.integration.http.client import HttpClient, HttpxClient
from ethos.integration.http.options import (
    RequestOptions,
    add_authorization,
    create_request_options,
)
from ethos.integration.http.urls import build_url

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class IntegrationResult:
    """Success/error result of a ``get`` or ``post``."""

    context: IntegrationContext
    data: Any = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class GraphQLResult:
    """Top-level GraphQL response fields alongside the context.

    Non-standard top-level fields are kept in ``extra``.
    """

    context: IntegrationContext
    data: Any = None
    errors: list[dict[str, Any]] | None = None
    extensions: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)


def _normalize_search_params(
    search_params: Mapping[str, Any] | None,
) -> dict[str, Any]:
    params = dict(search_params or {})
    criteria = params.get("criteria")
    if criteria is not None and not isinstance(criteria, str):
        params["criteria"] = json.dumps(criteria)
    return params


def _log_request(url: str, options: RequestOptions) -> None:
    if not logger.isEnabledFor(logging.DEBUG):
        return
    headers = dict(options.headers)
    if "Authorization" in headers:
        headers["Authorization"] = "Bearer " + mask_token(
            headers["Authorization"].removeprefix("Bearer ")
        )
    logger.debug("url %s", url)
    logger.debug("request headers=%s search_params=%s", headers, options.search_params)


async def _resolve_token(
    operation: str,
    *,
    api_key: str | None,
    context: IntegrationContext | None,
    integration_url: str | None,
    token: str | None,
    http_client: HttpClient,
) -> tuple[IntegrationContext, str]:
    result = await get_token(
        api_key=api_key,
        context=context,
        integration_url=integration_url,
        token=token,
        http_client=http_client,
    )
    if not result.token:
        raise AuthenticationError(f"{operation} failed to get a token")
    return result.context, result.token


async def get(
    *,
    resource: str | None,
    api_key: str | None = None,
    context: IntegrationContext | None = None,
    token: str | None = None,
    base: str = "api",
    id: str | None = None,
    search_params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    integration_url: str | None = None,
    http_client: HttpClient | None = None,
) -> IntegrationResult:
    """GET a resource (or one item of it by ``id``).

    ``search_params["criteria"]`` may be given as a structure; it is sent
    as a JSON string.
    """
    if not resource:
        raise InvalidArgument("get: missing resource name")

    client = http_client or HttpxClient()
    context, token_to_use = await _resolve_token(
        "get",
        api_key=api_key,
        context=context,
        integration_url=integration_url,
        token=token,
        http_client=client,
    )

    options = create_request_options(headers)
    add_authorization(token_to_use, options)
    options.search_params = _normalize_search_params(search_params)

    url = build_url(base=base, resource=resource, id=id, integration_url=integration_url)
    context.get_count += 1
    try:
        _log_request(url, options)
        response = await client.get(url, options)
        if response.status_code == 200:
            return IntegrationResult(context=context, data=response.json())

        logger.error("Integration get failed. response status: %s", response.status_code)
        raise RequestFailed(
            f"Integration get failed. response status: {response.status_code}",
            status_code=response.status_code,
        )
    except Exception as error:
        logger.error("ethos get failed: %s", error)
        return IntegrationResult(context=context, error=error)


async def post(
    *,
    resource: str | None,
    data: Any = None,
    api_key: str | None = None,
    context: IntegrationContext | None = None,
    token: str | None = None,
    base: str = "api",
    id: str | None = None,
    search_params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    integration_url: str | None = None,
    http_client: HttpClient | None = None,
) -> IntegrationResult:
    """POST ``data`` as JSON to a resource. 200 and 201 count as success."""
    if not resource:
        raise InvalidArgument("post: missing resource name")

    client = http_client or HttpxClient()
    context, token_to_use = await _resolve_token(
        "post",
        api_key=api_key,
        context=context,
        integration_url=integration_url,
        token=token,
        http_client=client,
    )

    options = create_request_options({**(headers or {}), **JSON_HEADERS})
    add_authorization(token_to_use, options)
    options.search_params = _normalize_search_params(search_params)
    options.json = data

    url = build_url(base=base, resource=resource, id=id, integration_url=integration_url)
    context.post_count += 1
    try:
        _log_request(url, options)
        response = await client.post(url, options)
        if response.status_code in (200, 201):
            return IntegrationResult(context=context, data=response.json())

        logger.error("Integration post failed. response status: %s", response.status_code)
        raise RequestFailed(
            f"Integration post failed. response status: {response.status_code}",
            status_code=response.status_code,
        )
    except Exception as error:
        logger.error("ethos post failed: %s", error)
        return IntegrationResult(context=context, error=error)


async def graphql(
    *,
    query: str,
    variables: Mapping[str, Any] | None = None,
    api_key: str | None = None,
    context: IntegrationContext | None = None,
    token: str | None = None,
    headers: Mapping[str, str] | None = None,
    integration_url: str | None = None,
    http_client: HttpClient | None = None,
) -> GraphQLResult:
    """Run a GraphQL query.

    Raises:
        IntegrationError: The provider returned a non-200 status, or a
            body that is not a JSON object.
    """
    client = http_client or HttpxClient()
    context, token_to_use = await _resolve_token(
        "graphql",
        api_key=api_key,
        context=context,
        integration_url=integration_url,
        token=token,
        http_client=client,
    )

    options = create_request_options(headers)
    add_authorization(token_to_use, options)
    options.json = {"query": query, "variables": variables}

    url = build_url(base="graphql", integration_url=integration_url)
    context.graphql_count += 1
    _log_request(url, options)
    response = await client.post(url, options)
    if response.status_code == 200:
        payload = response.json()
        if not isinstance(payload, dict):
            raise IntegrationError(
                f"Integration GraphQL returned a non-object body: {type(payload).__name__}",
                status_code=response.status_code,
            )
        payload = dict(payload)
        return GraphQLResult(
            context=context,
            data=payload.pop("data", None),
            errors=payload.pop("errors", None),
            extensions=payload.pop("extensions", None),
            extra=payload,
        )

    raise IntegrationError(
        f"Integration GraphQL failed. response status: {response.status_code}",
        status_code=response.status_code,
    )
