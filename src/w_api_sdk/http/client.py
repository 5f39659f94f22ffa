"""Cliente HTTP da W-API.

Ponto único de IO do SDK. Toda chamada passa por `request` (bloqueante) ou
`arequest` (assíncrona), que aplicam o mesmo tratamento de resposta:
- 4xx/5xx: loga status e corpo e levanta WApiHttpError
- demais: decodifica o JSON e devolve

Sem retries, backoff ou circuit breaker. Erros de transporte do httpx
propagam sem alteração.
"""

from __future__ import annotations

import asyncio
import json
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from w_api_sdk.errors import WApiDecodeError, WApiHttpError
from w_api_sdk.http.logging import (
    log_async_client_left_open,
    log_async_client_replaced,
    log_http_error,
    log_success,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from w_api_sdk.config.settings import WApiSettings

DEFAULT_HEADERS: dict[str, str] = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


@dataclass(frozen=True)
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    base_url: str
    timeout_seconds: float = 30.0
    verify_ssl: bool = True
    default_headers: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))


class WApiHttpClient:
    """Cliente HTTP pré-configurado para a W-API.

    Mantém um httpx.Client e um httpx.AsyncClient criados sob demanda.
    Ambos são seguros para reuso entre chamadas concorrentes; o SDK não
    guarda nenhum outro estado entre requisições.

    O pool de conexões do httpx.AsyncClient pertence ao event loop em que
    foi usado. Se o loop em execução mudar (ex: um `asyncio.run` por
    chamada), um novo AsyncClient é criado para o loop atual.
    """

    __slots__ = (
        "_async_client",
        "_async_loop",
        "_async_transport",
        "_client",
        "_config",
        "_lock",
        "_transport",
    )

    def __init__(
        self,
        config: HttpClientConfig,
        *,
        transport: httpx.BaseTransport | None = None,
        async_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            config: URL base, timeout e headers padrão
            transport: Transport síncrono opcional (ex: httpx.MockTransport)
            async_transport: Transport assíncrono opcional
        """
        self._config = config
        self._transport = transport
        self._async_transport = async_transport
        self._client: httpx.Client | None = None
        self._async_client: httpx.AsyncClient | None = None
        self._async_loop: asyncio.AbstractEventLoop | None = None
        self._lock = threading.Lock()

    @property
    def config(self) -> HttpClientConfig:
        return self._config

    def _get_client(self) -> httpx.Client:
        """Obtém ou cria cliente HTTP síncrono."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    base_url=self._config.base_url,
                    headers=self._config.default_headers,
                    timeout=self._config.timeout_seconds,
                    verify=self._config.verify_ssl,
                    transport=self._transport,
                )
            return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        """Obtém ou cria cliente HTTP assíncrono para o loop em execução."""
        loop = asyncio.get_running_loop()
        with self._lock:
            if self._async_client is not None and self._async_loop is not loop:
                # Conexões do loop anterior não podem ser fechadas daqui
                log_async_client_replaced()
                self._async_client = None
            if self._async_client is None:
                self._async_client = httpx.AsyncClient(
                    base_url=self._config.base_url,
                    headers=self._config.default_headers,
                    timeout=self._config.timeout_seconds,
                    verify=self._config.verify_ssl,
                    transport=self._async_transport,
                )
                self._async_loop = loop
            return self._async_client

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        """Executa requisição bloqueante e devolve o JSON da resposta.

        Raises:
            WApiHttpError: Se a W-API responder 4xx/5xx
            WApiDecodeError: Se o corpo de sucesso não for JSON
            httpx.TransportError: Falha de conexão/timeout
        """
        response = self._get_client().request(
            method,
            path,
            headers=dict(headers or {}),
            params=dict(params or {}),
            json=json,
        )
        return _handle_response(response, method, path)

    async def arequest(
        self,
        method: str,
        path: str,
        *,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, str] | None = None,
        json: Any = None,
    ) -> Any:
        """Versão assíncrona de `request`, com o mesmo tratamento de resposta."""
        response = await self._get_async_client().request(
            method,
            path,
            headers=dict(headers or {}),
            params=dict(params or {}),
            json=json,
        )
        return _handle_response(response, method, path)

    def close(self) -> None:
        """Fecha o cliente síncrono, se criado.

        O AsyncClient só fecha com `aclose`; se ele estiver aberto aqui, o
        fato é logado em WARNING e a referência é mantida para um `aclose`
        posterior.
        """
        with self._lock:
            client, self._client = self._client, None
            async_open = self._async_client is not None
        if client is not None:
            client.close()
        if async_open:
            log_async_client_left_open()

    async def aclose(self) -> None:
        """Fecha ambos os clientes, se criados."""
        loop = asyncio.get_running_loop()
        with self._lock:
            async_client, self._async_client = self._async_client, None
            same_loop = self._async_loop is loop
            self._async_loop = None
        if async_client is not None and same_loop:
            await async_client.aclose()
        self.close()

    def __enter__(self) -> WApiHttpClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> WApiHttpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def _handle_response(response: httpx.Response, method: str, path: str) -> Any:
    """Traduz status de erro em exceção e decodifica respostas de sucesso."""
    if response.is_client_error or response.is_server_error:
        body = response.text
        log_http_error(method, path, response.status_code, body)
        raise WApiHttpError(response.status_code, body)

    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise WApiDecodeError(f"Resposta da W-API não é JSON válido em {path}") from e

    log_success(method, path, response.status_code)
    return payload


def create_http_client(
    settings: WApiSettings | None = None,
    *,
    transport: httpx.BaseTransport | None = None,
    async_transport: httpx.AsyncBaseTransport | None = None,
) -> WApiHttpClient:
    """Factory para criar cliente W-API com config padrão.

    Args:
        settings: WApiSettings opcional. Se None, carrega do ambiente.
        transport: Transport síncrono opcional (testes, proxies)
        async_transport: Transport assíncrono opcional

    Returns:
        Cliente HTTP configurado para a W-API.

    Raises:
        ValueError: Se as settings forem inválidas.
    """
    from w_api_sdk.config.settings import get_w_api_settings

    w_api = settings or get_w_api_settings()
    errors = w_api.validate()
    if errors:
        raise ValueError(f"Configuração W-API inválida: {'; '.join(errors)}")

    config = HttpClientConfig(
        base_url=w_api.base_url,
        timeout_seconds=w_api.request_timeout_seconds,
        verify_ssl=w_api.verify_ssl,
    )
    return WApiHttpClient(config, transport=transport, async_transport=async_transport)
