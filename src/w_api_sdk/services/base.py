"""Base comum dos serviços: autenticação e decodificação de respostas."""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from w_api_sdk.errors import WApiDecodeError
from w_api_sdk.http.client import WApiHttpClient, create_http_client

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    """Serviço que delega todo IO a um WApiHttpClient compartilhado."""

    __slots__ = ("_http",)

    def __init__(self, http_client: WApiHttpClient | None = None) -> None:
        self._http = http_client or create_http_client()

    @property
    def http_client(self) -> WApiHttpClient:
        return self._http


def authorization_header(access_token: str) -> dict[str, str]:
    """Monta header Bearer.

    Raises:
        ValueError: Se access_token estiver vazio.
    """
    if not access_token or not access_token.strip():
        raise ValueError("access_token é obrigatório para chamadas à W-API")
    return {"Authorization": f"Bearer {access_token}"}


def instance_id_param(instance_id: str) -> dict[str, str]:
    """Monta query param instanceId.

    Raises:
        ValueError: Se instance_id estiver vazio.
    """
    if not instance_id or not instance_id.strip():
        raise ValueError("instance_id é obrigatório para chamadas à W-API")
    return {"instanceId": instance_id}


def decode_response(model: type[ModelT], payload: Any, path: str) -> ModelT:
    """Converte o JSON da resposta no modelo esperado.

    Raises:
        WApiDecodeError: Se o payload não corresponder ao modelo.
    """
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.warning(
            "w_api_response_mismatch",
            extra={"path": path, "model": model.__name__, "error_count": e.error_count()},
        )
        raise WApiDecodeError(
            f"Resposta de {path} não corresponde a {model.__name__}",
            model=model.__name__,
        ) from e
