"""Serviço de envio de mensagens da W-API.

Para cada tipo de conteúdo há quatro formas de chamada:
- send_<tipo>_message(access_token, instance_id, request)
- send_<tipo>_message_async(access_token, instance_id, request)
- send_<tipo>_message_advanced(headers, query_params, request)
- send_<tipo>_message_advanced_async(headers, query_params, request)

As formas "advanced" repassam headers e query params exatamente como
recebidos. Todas terminam em `_send`/`_send_async`, que validam a
requisição antes de qualquer IO.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from w_api_sdk.models.responses import MessageResponse
from w_api_sdk.models.validation import ensure_valid_message_request
from w_api_sdk.services.base import (
    BaseService,
    authorization_header,
    decode_response,
    instance_id_param,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from w_api_sdk.models.requests import (
        AudioMessageRequest,
        DocumentMessageRequest,
        ImageMessageRequest,
        MessageKind,
        MessageRequest,
        TextMessageRequest,
        VideoMessageRequest,
    )

logger = logging.getLogger(__name__)

AUDIO_MESSAGE_PATH = "/message/send-audio"
DOCUMENT_MESSAGE_PATH = "/message/send-document"
IMAGE_MESSAGE_PATH = "/message/send-image"
TEXT_MESSAGE_PATH = "/message/send-text"
VIDEO_MESSAGE_PATH = "/message/send-video"

MESSAGE_PATHS: dict[str, str] = {
    "audio": AUDIO_MESSAGE_PATH,
    "document": DOCUMENT_MESSAGE_PATH,
    "image": IMAGE_MESSAGE_PATH,
    "text": TEXT_MESSAGE_PATH,
    "video": VIDEO_MESSAGE_PATH,
}


class MessageService(BaseService):
    """Envio de mensagens de texto, imagem, áudio, vídeo e documento."""

    __slots__ = ()

    # --- Envio genérico (roteado pelo kind da requisição) ---

    def send_message(
        self,
        access_token: str,
        instance_id: str,
        request: MessageRequest,
    ) -> MessageResponse:
        """Envia qualquer variante de mensagem para o endpoint do seu tipo."""
        return self._send(
            _kind_of(request),
            authorization_header(access_token),
            instance_id_param(instance_id),
            request,
        )

    async def send_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: MessageRequest,
    ) -> MessageResponse:
        """Versão assíncrona de `send_message`."""
        return await self._send_async(
            _kind_of(request),
            authorization_header(access_token),
            instance_id_param(instance_id),
            request,
        )

    # --- Texto ---

    def send_text_message(
        self,
        access_token: str,
        instance_id: str,
        request: TextMessageRequest,
    ) -> MessageResponse:
        """Envia mensagem de texto, bloqueando até a resposta.

        Args:
            access_token: Token Bearer da instância
            instance_id: ID da instância remetente
            request: Destinatário e texto

        Returns:
            Confirmação com instanceId, messageId e insertedId.
        """
        return self._send(
            "text", authorization_header(access_token), instance_id_param(instance_id), request
        )

    async def send_text_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: TextMessageRequest,
    ) -> MessageResponse:
        return await self._send_async(
            "text", authorization_header(access_token), instance_id_param(instance_id), request
        )

    def send_text_message_advanced(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: TextMessageRequest,
    ) -> MessageResponse:
        """Envia texto com headers e query params fornecidos pelo chamador."""
        return self._send("text", headers, query_params, request)

    async def send_text_message_advanced_async(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: TextMessageRequest,
    ) -> MessageResponse:
        return await self._send_async("text", headers, query_params, request)

    # --- Imagem ---

    def send_image_message(
        self,
        access_token: str,
        instance_id: str,
        request: ImageMessageRequest,
    ) -> MessageResponse:
        """Envia imagem (URL ou base64), bloqueando até a resposta."""
        return self._send(
            "image", authorization_header(access_token), instance_id_param(instance_id), request
        )

    async def send_image_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: ImageMessageRequest,
    ) -> MessageResponse:
        return await self._send_async(
            "image", authorization_header(access_token), instance_id_param(instance_id), request
        )

    def send_image_message_advanced(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: ImageMessageRequest,
    ) -> MessageResponse:
        return self._send("image", headers, query_params, request)

    async def send_image_message_advanced_async(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: ImageMessageRequest,
    ) -> MessageResponse:
        return await self._send_async("image", headers, query_params, request)

    # --- Áudio ---

    def send_audio_message(
        self,
        access_token: str,
        instance_id: str,
        request: AudioMessageRequest,
    ) -> MessageResponse:
        """Envia áudio (URL ou base64), bloqueando até a resposta."""
        return self._send(
            "audio", authorization_header(access_token), instance_id_param(instance_id), request
        )

    async def send_audio_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: AudioMessageRequest,
    ) -> MessageResponse:
        return await self._send_async(
            "audio", authorization_header(access_token), instance_id_param(instance_id), request
        )

    def send_audio_message_advanced(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: AudioMessageRequest,
    ) -> MessageResponse:
        return self._send("audio", headers, query_params, request)

    async def send_audio_message_advanced_async(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: AudioMessageRequest,
    ) -> MessageResponse:
        return await self._send_async("audio", headers, query_params, request)

    # --- Vídeo ---

    def send_video_message(
        self,
        access_token: str,
        instance_id: str,
        request: VideoMessageRequest,
    ) -> MessageResponse:
        """Envia vídeo (URL ou base64), bloqueando até a resposta."""
        return self._send(
            "video", authorization_header(access_token), instance_id_param(instance_id), request
        )

    async def send_video_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: VideoMessageRequest,
    ) -> MessageResponse:
        return await self._send_async(
            "video", authorization_header(access_token), instance_id_param(instance_id), request
        )

    def send_video_message_advanced(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: VideoMessageRequest,
    ) -> MessageResponse:
        return self._send("video", headers, query_params, request)

    async def send_video_message_advanced_async(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: VideoMessageRequest,
    ) -> MessageResponse:
        return await self._send_async("video", headers, query_params, request)

    # --- Documento ---

    def send_document_message(
        self,
        access_token: str,
        instance_id: str,
        request: DocumentMessageRequest,
    ) -> MessageResponse:
        """Envia documento com extensão, bloqueando até a resposta."""
        return self._send(
            "document", authorization_header(access_token), instance_id_param(instance_id), request
        )

    async def send_document_message_async(
        self,
        access_token: str,
        instance_id: str,
        request: DocumentMessageRequest,
    ) -> MessageResponse:
        return await self._send_async(
            "document", authorization_header(access_token), instance_id_param(instance_id), request
        )

    def send_document_message_advanced(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: DocumentMessageRequest,
    ) -> MessageResponse:
        return self._send("document", headers, query_params, request)

    async def send_document_message_advanced_async(
        self,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: DocumentMessageRequest,
    ) -> MessageResponse:
        return await self._send_async("document", headers, query_params, request)

    # --- Primitivas ---

    def _send(
        self,
        kind: MessageKind,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: MessageRequest,
    ) -> MessageResponse:
        path = _prepare(kind, request)
        payload = self._http.request(
            "POST", path, headers=headers, params=query_params, json=request.to_payload()
        )
        return decode_response(MessageResponse, payload, path)

    async def _send_async(
        self,
        kind: MessageKind,
        headers: Mapping[str, str],
        query_params: Mapping[str, str],
        request: MessageRequest,
    ) -> MessageResponse:
        path = _prepare(kind, request)
        payload = await self._http.arequest(
            "POST", path, headers=headers, params=query_params, json=request.to_payload()
        )
        return decode_response(MessageResponse, payload, path)


def _kind_of(request: MessageRequest) -> MessageKind:
    kind = getattr(request, "kind", None)
    if kind not in MESSAGE_PATHS:
        raise ValueError(f"Tipo de mensagem não suportado: {type(request).__name__}")
    return kind


def _prepare(kind: MessageKind, request: MessageRequest) -> str:
    """Valida a requisição para o tipo e devolve o path do endpoint."""
    ensure_valid_message_request(request, expected_kind=kind)
    path = MESSAGE_PATHS[kind]
    logger.debug("w_api_send_message", extra={"kind": kind, "path": path})
    return path
