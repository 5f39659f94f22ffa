"""Modelos de requisição e resposta da W-API."""

from w_api_sdk.models.requests import (
    MESSAGE_REQUEST_TYPES,
    AudioMessageRequest,
    DocumentMessageRequest,
    ImageMessageRequest,
    MessageKind,
    MessageRequest,
    MessageRequestUnion,
    TextMessageRequest,
    VideoMessageRequest,
    parse_message_request,
)
from w_api_sdk.models.responses import InstanceResponse, MessageResponse
from w_api_sdk.models.validation import (
    FieldError,
    ValidationResult,
    ensure_valid_message_request,
    validate_message_request,
)

__all__ = [
    "MESSAGE_REQUEST_TYPES",
    "AudioMessageRequest",
    "DocumentMessageRequest",
    "FieldError",
    "ImageMessageRequest",
    "InstanceResponse",
    "MessageKind",
    "MessageRequest",
    "MessageRequestUnion",
    "MessageResponse",
    "TextMessageRequest",
    "ValidationResult",
    "VideoMessageRequest",
    "ensure_valid_message_request",
    "parse_message_request",
    "validate_message_request",
]
