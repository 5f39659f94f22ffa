"""Ponto de entrada do SDK: um cliente HTTP compartilhado pelos serviços.

Uso:
    from w_api_sdk import WApiSDK, TextMessageRequest

    with WApiSDK() as sdk:
        sdk.messages.send_text_message(
            token,
            instance_id,
            TextMessageRequest(phone="5511999999999", message="Olá!"),
        )
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from w_api_sdk.http.client import create_http_client
from w_api_sdk.services.instance import InstanceService
from w_api_sdk.services.message import MessageService

if TYPE_CHECKING:
    from w_api_sdk.config.settings import WApiSettings
    from w_api_sdk.http.client import WApiHttpClient


class WApiSDK:
    """Agrupa InstanceService e MessageService sobre o mesmo WApiHttpClient."""

    __slots__ = ("_http", "instances", "messages")

    def __init__(
        self,
        settings: WApiSettings | None = None,
        *,
        http_client: WApiHttpClient | None = None,
    ) -> None:
        """Inicializa o SDK.

        Args:
            settings: Settings explícitas. Se None, carrega do ambiente.
            http_client: Cliente já configurado (tem precedência sobre settings).
        """
        self._http = http_client or create_http_client(settings)
        self.instances = InstanceService(self._http)
        self.messages = MessageService(self._http)

    @property
    def http_client(self) -> WApiHttpClient:
        return self._http

    def close(self) -> None:
        self._http.close()

    async def aclose(self) -> None:
        await self._http.aclose()

    def __enter__(self) -> WApiSDK:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    async def __aenter__(self) -> WApiSDK:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
