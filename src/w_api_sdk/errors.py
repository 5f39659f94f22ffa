"""Exceções do SDK W-API.

Nenhuma delas é recuperada internamente: toda falha chega ao chamador.
Falhas de transporte (conexão, timeout) são exceções do httpx e não são
reembaladas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from w_api_sdk.models.validation import FieldError


class WApiError(RuntimeError):
    """Base para erros levantados pelo SDK."""


class WApiHttpError(WApiError):
    """Resposta 4xx/5xx da W-API.

    Attributes:
        status_code: Status HTTP recebido
        body: Corpo bruto da resposta (texto)
    """

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Erro ao chamar W-API: {body}")
        self.status_code = status_code
        self.body = body


class WApiDecodeError(WApiError):
    """Corpo da resposta não é JSON ou não corresponde ao modelo esperado."""

    def __init__(self, message: str, *, model: str | None = None) -> None:
        super().__init__(message)
        self.model = model


class MessageValidationError(WApiError, ValueError):
    """Requisição de mensagem viola uma ou mais restrições declaradas."""

    def __init__(self, errors: Iterable[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        details = "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        super().__init__(f"Requisição inválida: {details}")

    @property
    def fields(self) -> tuple[str, ...]:
        """Campos que falharam, na ordem reportada."""
        return tuple(error.field for error in self.errors)
