"""SDK Python para a W-API (instâncias e envio de mensagens WhatsApp).

Uso:
    from w_api_sdk import WApiSDK, TextMessageRequest

    sdk = WApiSDK()
    response = sdk.messages.send_text_message(
        token, instance_id, TextMessageRequest(phone="5511999999999", message="Olá!")
    )

O SDK só emite logs e fica silencioso por padrão; para saída JSON use
configure_logging(level="DEBUG", service_name="minha_app").
"""

import logging

from w_api_sdk.config.logging import configure_logging
from w_api_sdk.config.settings import WApiSettings, get_w_api_settings
from w_api_sdk.errors import (
    MessageValidationError,
    WApiDecodeError,
    WApiError,
    WApiHttpError,
)
from w_api_sdk.http.client import WApiHttpClient, create_http_client
from w_api_sdk.models import (
    AudioMessageRequest,
    DocumentMessageRequest,
    FieldError,
    ImageMessageRequest,
    InstanceResponse,
    MessageRequest,
    MessageResponse,
    TextMessageRequest,
    ValidationResult,
    VideoMessageRequest,
    parse_message_request,
    validate_message_request,
)
from w_api_sdk.sdk import WApiSDK
from w_api_sdk.services import InstanceService, MessageService

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AudioMessageRequest",
    "DocumentMessageRequest",
    "FieldError",
    "ImageMessageRequest",
    "InstanceResponse",
    "InstanceService",
    "MessageRequest",
    "MessageResponse",
    "MessageService",
    "MessageValidationError",
    "TextMessageRequest",
    "ValidationResult",
    "VideoMessageRequest",
    "WApiDecodeError",
    "WApiError",
    "WApiHttpClient",
    "WApiHttpError",
    "WApiSDK",
    "WApiSettings",
    "configure_logging",
    "create_http_client",
    "get_w_api_settings",
    "parse_message_request",
    "validate_message_request",
]
