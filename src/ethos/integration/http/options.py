from __future__ import annotations

import copy
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

BASE_HEADERS: Mapping[str, str] = MappingProxyType(
    {
        "Accept": "application/json",
        "Cache-Control": "no-cache",
    }
)


@dataclass
class RequestOptions:
    """Per-call request options handed to the HTTP client."""

    headers: dict[str, str] = field(default_factory=dict)
    search_params: dict[str, Any] | None = None
    json: Any = None


def create_request_options(headers: Mapping[str, str] | None = None) -> RequestOptions:
    """Fresh options from the base template, with ``headers`` merged over it."""
    options = RequestOptions(headers=copy.deepcopy(dict(BASE_HEADERS)))
    if headers:
        options.headers.update(headers)
    return options


def add_authorization(token: str, options: RequestOptions) -> None:
    options.headers["Authorization"] = f"Bearer {token}"
