# ethos/integration/client.py
"""
Bound facade over the module-level operations.
"""
from __future__ import annotations

from typing import Any, Mapping

from ethos.integration import operations
from ethos.integration.auth.tokens import get_token
from ethos.integration.core.context import IntegrationContext
from ethos.integration.http.client import HttpClient, HttpxClient


class EthosClient:
    """Ethos client bound to one API key and one :class:`IntegrationContext`.

    Example::

        client = EthosClient(api_key="...", integration_url="https://integrate.elluciancloud.com")
        result = await client.get("persons", search_params={"criteria": {"names": [{"firstName": "Jo"}]}})
        if result.ok:
            ...
    """

    def __init__(
        self,
        *,
        api_key: str | None = None,
        integration_url: str | None = None,
        headers: Mapping[str, str] | None = None,
        http_client: HttpClient | None = None,
        context: IntegrationContext | None = None,
    ) -> None:
        self.api_key = api_key
        self.integration_url = integration_url
        self.headers = dict(headers or {})
        self.http_client = http_client or HttpxClient()
        self.context = context or IntegrationContext()

    def _merge_headers(self, headers: Mapping[str, str] | None) -> dict[str, str]:
        return {**self.headers, **(headers or {})}

    async def get_token(self, token: str | None = None) -> str:
        result = await get_token(
            api_key=self.api_key,
            context=self.context,
            integration_url=self.integration_url,
            token=token,
            http_client=self.http_client,
        )
        return result.token

    async def get(
        self,
        resource: str,
        *,
        id: str | None = None,
        base: str = "api",
        search_params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
    ) -> operations.IntegrationResult:
        return await operations.get(
            resource=resource,
            id=id,
            base=base,
            search_params=search_params,
            headers=self._merge_headers(headers),
            api_key=self.api_key,
            context=self.context,
            token=token,
            integration_url=self.integration_url,
            http_client=self.http_client,
        )

    async def post(
        self,
        resource: str,
        data: Any = None,
        *,
        id: str | None = None,
        base: str = "api",
        search_params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
    ) -> operations.IntegrationResult:
        return await operations.post(
            resource=resource,
            data=data,
            id=id,
            base=base,
            search_params=search_params,
            headers=self._merge_headers(headers),
            api_key=self.api_key,
            context=self.context,
            token=token,
            integration_url=self.integration_url,
            http_client=self.http_client,
        )

    async def graphql(
        self,
        query: str,
        variables: Mapping[str, Any] | None = None,
        *,
        headers: Mapping[str, str] | None = None,
        token: str | None = None,
    ) -> operations.GraphQLResult:
        return await operations.graphql(
            query=query,
            variables=variables,
            headers=self._merge_headers(headers),
            api_key=self.api_key,
            context=self.context,
            token=token,
            integration_url=self.integration_url,
            http_client=self.http_client,
        )
