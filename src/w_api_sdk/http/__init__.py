"""Camada HTTP do SDK: único ponto de IO com a W-API."""

from w_api_sdk.http.client import (
    DEFAULT_HEADERS,
    HttpClientConfig,
    WApiHttpClient,
    create_http_client,
)

__all__ = [
    "DEFAULT_HEADERS",
    "HttpClientConfig",
    "WApiHttpClient",
    "create_http_client",
]
