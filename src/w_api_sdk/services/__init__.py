"""Serviços da W-API: instâncias e mensagens."""

from w_api_sdk.services.instance import FETCH_INSTANCE_PATH, InstanceService
from w_api_sdk.services.message import MESSAGE_PATHS, MessageService

__all__ = [
    "FETCH_INSTANCE_PATH",
    "MESSAGE_PATHS",
    "InstanceService",
    "MessageService",
]
