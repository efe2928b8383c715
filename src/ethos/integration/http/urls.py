from __future__ import annotations

from ethos.integration.core.config import integration_url as resolve_root
from ethos.integration.core.errors import ConfigurationError

RESOURCE_BASES = ("api", "admin")
ROOT_BASES = ("auth", "graphql")


def build_url(
    base: str = "api",
    resource: str | None = None,
    id: str | None = None,
    integration_url: str | None = None,
) -> str:
    """Compose a target URL under the integration root.

    ``api``/``admin`` address a resource (optionally a single item by id);
    ``auth``/``graphql`` address the root endpoint and ignore resource/id.

    A missing root is not an error here: the URL is built with an empty
    root segment and the request fails downstream.
    """
    root = resolve_root(integration_url) or ""

    if base in RESOURCE_BASES:
        url = f"{root}/{base}/{resource}"
        if id:
            url = f"{url}/{id}"
        return url

    if base in ROOT_BASES:
        return f"{root}/{base}"

    raise ConfigurationError(f"Unknown base to build_url: {base}")
