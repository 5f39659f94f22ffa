"""Helpers de logging para chamadas à W-API.

Tokens e headers nunca são logados; o corpo de erro sim, por ser a única
pista do motivo da falha.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_http_error(
    method: str,
    path: str,
    status_code: int,
    body: str,
) -> None:
    """Loga resposta 4xx/5xx com status e corpo."""
    logger.error(
        "w_api_http_error",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "response_body": body,
        },
    )


def log_success(
    method: str,
    path: str,
    status_code: int,
) -> None:
    """Loga sucesso em nível DEBUG."""
    logger.debug(
        "w_api_http_success",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
        },
    )


def log_async_client_replaced() -> None:
    """Loga troca do AsyncClient por mudança de event loop."""
    logger.debug("w_api_async_client_replaced")


def log_async_client_left_open() -> None:
    """Loga close() síncrono com AsyncClient ainda aberto (falta aclose)."""
    logger.warning(
        "w_api_async_client_left_open",
        extra={"hint": "use aclose() ou 'async with' após chamadas *_async"},
    )
