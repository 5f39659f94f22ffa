"""Serviço de instâncias da W-API."""

from __future__ import annotations

from w_api_sdk.models.responses import InstanceResponse
from w_api_sdk.services.base import (
    BaseService,
    authorization_header,
    decode_response,
    instance_id_param,
)

FETCH_INSTANCE_PATH = "/instance/fetch-instance"


class InstanceService(BaseService):
    """Consulta de instâncias, bloqueante ou assíncrona.

    Sem paginação nem cache: cada chamada consulta a API.
    """

    __slots__ = ()

    def find_by_id(self, access_token: str, instance_id: str) -> InstanceResponse:
        """Busca uma instância pelo ID, bloqueando até a resposta.

        Args:
            access_token: Token Bearer da instância
            instance_id: ID da instância

        Returns:
            Dados da instância.

        Raises:
            ValueError: Se access_token ou instance_id estiverem vazios
            WApiHttpError: Se a API responder 4xx/5xx
            WApiDecodeError: Se a resposta não for uma instância válida
        """
        headers = authorization_header(access_token)
        params = instance_id_param(instance_id)
        payload = self._http.request("GET", FETCH_INSTANCE_PATH, headers=headers, params=params)
        return decode_response(InstanceResponse, payload, FETCH_INSTANCE_PATH)

    async def find_by_id_async(self, access_token: str, instance_id: str) -> InstanceResponse:
        """Versão assíncrona de `find_by_id`."""
        headers = authorization_header(access_token)
        params = instance_id_param(instance_id)
        payload = await self._http.arequest(
            "GET", FETCH_INSTANCE_PATH, headers=headers, params=params
        )
        return decode_response(InstanceResponse, payload, FETCH_INSTANCE_PATH)
