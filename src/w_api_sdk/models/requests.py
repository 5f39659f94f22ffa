"""Modelos de requisição de envio de mensagens.

Envelope comum (phone, delayMessage) + variante por tipo de conteúdo,
discriminada pelo campo `kind`. `kind` nunca vai para o corpo JSON: o tipo
já é determinado pelo endpoint.
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

MessageKind = Literal["text", "image", "audio", "video", "document"]

# DDI (1-3 dígitos) + DDD (2) + número (8-9), ex: 5511999999999
PHONE_PATTERN = re.compile(r"[1-9]\d{1,2}\d{2}\d{8,9}", re.ASCII)
PHONE_FORMAT_MESSAGE = (
    "Phone must be in format: country code + area code + number (e.g. 5511999999999)"
)


def _require_not_empty(value: str, label: str) -> str:
    if not value:
        raise ValueError(f"{label} can not be empty!")
    return value


class MessageRequest(BaseModel):
    """Envelope comum a todas as mensagens.

    Não é instanciável diretamente: use uma das variantes por tipo.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    phone: str
    delay_message: int | None = Field(default=None, alias="delayMessage")

    def model_post_init(self, __context: Any) -> None:
        if type(self) is MessageRequest:
            raise TypeError(
                "MessageRequest é abstrato; use TextMessageRequest, ImageMessageRequest, "
                "AudioMessageRequest, VideoMessageRequest ou DocumentMessageRequest"
            )

    @field_validator("phone")
    @classmethod
    def _check_phone(cls, value: str) -> str:
        _require_not_empty(value, "Phone")
        if not PHONE_PATTERN.fullmatch(value):
            raise ValueError(PHONE_FORMAT_MESSAGE)
        return value

    def to_payload(self) -> dict[str, Any]:
        """Corpo JSON com as chaves exatas da API (camelCase, sem nulos)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class TextMessageRequest(MessageRequest):
    kind: Literal["text"] = Field(default="text", exclude=True)
    message: str

    @field_validator("message")
    @classmethod
    def _check_message(cls, value: str) -> str:
        return _require_not_empty(value, "Message")


class ImageMessageRequest(MessageRequest):
    """Imagem por URL ou base64."""

    kind: Literal["image"] = Field(default="image", exclude=True)
    image: str

    @field_validator("image")
    @classmethod
    def _check_image(cls, value: str) -> str:
        return _require_not_empty(value, "Image")


class AudioMessageRequest(MessageRequest):
    """Áudio por URL ou base64."""

    kind: Literal["audio"] = Field(default="audio", exclude=True)
    audio: str

    @field_validator("audio")
    @classmethod
    def _check_audio(cls, value: str) -> str:
        return _require_not_empty(value, "Audio")


class VideoMessageRequest(MessageRequest):
    """Vídeo por URL ou base64."""

    kind: Literal["video"] = Field(default="video", exclude=True)
    video: str

    @field_validator("video")
    @classmethod
    def _check_video(cls, value: str) -> str:
        return _require_not_empty(value, "Video")


class DocumentMessageRequest(MessageRequest):
    """Documento por URL ou base64, com extensão explícita (ex: "pdf")."""

    kind: Literal["document"] = Field(default="document", exclude=True)
    document: str
    extension: str

    @field_validator("document")
    @classmethod
    def _check_document(cls, value: str) -> str:
        return _require_not_empty(value, "Document")

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        return _require_not_empty(value, "Extension")


MessageRequestUnion = Annotated[
    TextMessageRequest
    | ImageMessageRequest
    | AudioMessageRequest
    | VideoMessageRequest
    | DocumentMessageRequest,
    Field(discriminator="kind"),
]

MESSAGE_REQUEST_TYPES: dict[str, type[MessageRequest]] = {
    "text": TextMessageRequest,
    "image": ImageMessageRequest,
    "audio": AudioMessageRequest,
    "video": VideoMessageRequest,
    "document": DocumentMessageRequest,
}

_message_request_adapter: TypeAdapter[MessageRequestUnion] = TypeAdapter(MessageRequestUnion)


def parse_message_request(data: dict[str, Any]) -> MessageRequest:
    """Constrói a variante correta a partir de um dict com `kind`.

    Raises:
        pydantic.ValidationError: Se `kind` for desconhecido ou algum campo inválido.
    """
    return _message_request_adapter.validate_python(data)
