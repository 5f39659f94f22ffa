"""Validação explícita de requisições de mensagem.

Os modelos já validam na construção; esta camada revalida antes do envio
(cobre instâncias criadas com `model_construct` e variante errada para o
endpoint) e devolve um resultado estruturado em vez de exceção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import ValidationError

from w_api_sdk.errors import MessageValidationError

if TYPE_CHECKING:
    from w_api_sdk.models.requests import MessageKind, MessageRequest


@dataclass(frozen=True)
class FieldError:
    """Falha de uma restrição em um campo (nome como no JSON)."""

    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Resultado da validação: vazio = ok."""

    errors: tuple[FieldError, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def _field_error(error: dict) -> FieldError:
    field = ".".join(str(part) for part in error["loc"]) or "__root__"
    if error["type"] == "value_error":
        # Mensagem original do validator, sem o prefixo "Value error, "
        return FieldError(field, str(error["ctx"]["error"]))
    return FieldError(field, error["msg"])


def validate_message_request(
    request: MessageRequest,
    expected_kind: MessageKind | None = None,
) -> ValidationResult:
    """Revalida todas as restrições declaradas da requisição.

    Args:
        request: Requisição a validar
        expected_kind: Tipo exigido pelo endpoint, se houver

    Returns:
        ValidationResult com um FieldError por restrição violada.
    """
    errors: list[FieldError] = []

    kind = getattr(request, "kind", None)
    if expected_kind is not None and kind != expected_kind:
        errors.append(FieldError("kind", f"Expected {expected_kind} message, got {kind}"))

    model = type(request)
    data = {
        name: value
        for name in model.model_fields
        if (value := getattr(request, name, None)) is not None
    }
    try:
        model.model_validate(data)
    except ValidationError as e:
        errors.extend(_field_error(error) for error in e.errors())

    return ValidationResult(errors=tuple(errors))


def ensure_valid_message_request(
    request: MessageRequest,
    expected_kind: MessageKind | None = None,
) -> None:
    """Levanta MessageValidationError se a requisição for inválida."""
    result = validate_message_request(request, expected_kind)
    if not result.ok:
        raise MessageValidationError(result.errors)
