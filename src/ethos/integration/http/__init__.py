"""URL building, request options and the HTTP client capability."""

from ethos.integration.http.client import HttpClient, HttpResponse, HttpxClient
from ethos.integration.http.options import (
    RequestOptions,
    add_authorization,
    create_request_options,
)
from ethos.integration.http.urls import build_url

__all__ = [
    "HttpClient",
    "HttpResponse",
    "HttpxClient",
    "RequestOptions",
    "add_authorization",
    "build_url",
    "create_request_options",
]
