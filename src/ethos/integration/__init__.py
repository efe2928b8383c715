"""Ethos Integration client: token caching and authenticated REST/GraphQL calls."""

from ethos.integration.auth.models import CachedToken
from ethos.integration.auth.tokens import TokenResult, get_token
from ethos.integration.client import EthosClient
from ethos.integration.core.context import IntegrationContext
from ethos.integration.core.logging import configure_logging
from ethos.integration.core.errors import (
    AuthenticationError,
    ConfigurationError,
    EthosError,
    IntegrationError,
    InvalidArgument,
    RequestFailed,
)
from ethos.integration.operations import (
    GraphQLResult,
    IntegrationResult,
    get,
    graphql,
    post,
)

__all__ = [
    "AuthenticationError",
    "CachedToken",
    "ConfigurationError",
    "EthosClient",
    "EthosError",
    "GraphQLResult",
    "IntegrationContext",
    "IntegrationError",
    "IntegrationResult",
    "InvalidArgument",
    "RequestFailed",
    "TokenResult",
    "configure_logging",
    "get",
    "get_token",
    "graphql",
    "post",
]
