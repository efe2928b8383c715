# ethos/integration/core/context.py
"""
IntegrationContext – caller-owned session state.

Carries the token cache and call counters across one logical chain of
calls. Every operation mutates the context in place and hands the same
reference back in its result.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ethos.integration.auth.models import CachedToken


@dataclass
class IntegrationContext:
    """Mutable per-chain session object.

    Attributes:
        tokens_by_api_key: Cached bearer token per API key. One entry per
            distinct key ever used; entries are overwritten, never evicted.
        get_count: Number of ``get`` attempts past token resolution.
        post_count: Number of ``post`` attempts past token resolution.
        graphql_count: Number of ``graphql`` attempts past token resolution.

    There is no locking. Concurrent calls sharing a context may lose counter
    increments and race on cache writes (last write wins).
    """

    tokens_by_api_key: dict[str, CachedToken] = field(default_factory=dict)
    get_count: int = 0
    post_count: int = 0
    graphql_count: int = 0

    def cached_token(self, api_key: str | None) -> CachedToken | None:
        if api_key is None:
            return None
        return self.tokens_by_api_key.get(api_key)

    def store_token(self, api_key: str, token: CachedToken) -> None:
        self.tokens_by_api_key[api_key] = token
