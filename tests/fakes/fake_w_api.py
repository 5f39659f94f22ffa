"""Fake da W-API sobre httpx.MockTransport para testes deterministas."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import httpx

from w_api_sdk.models.requests import (
    AudioMessageRequest,
    DocumentMessageRequest,
    ImageMessageRequest,
    MessageRequest,
    TextMessageRequest,
    VideoMessageRequest,
)

VALID_PHONE = "5511999999999"
ACCESS_TOKEN = "token-123"
INSTANCE_ID = "INST-42"

INSTANCE_PAYLOAD = {
    "instanceId": "INST-42",
    "instanceName": "Atendimento",
    "token": "tok-abc",
    "connected": True,
    "connectedPhone": "5511999999999",
    "contacts": 1520,
    "chats": 310,
    "messagesSent": 98765,
    "messagesReceived": 43210,
    "webhookConnectedUrl": "https://hooks.example.com/connected",
    "webhookDeliveryUrl": "https://hooks.example.com/delivery",
    "webhookDisconnectedUrl": "https://hooks.example.com/disconnected",
    "webhookStatusUrl": "https://hooks.example.com/status",
    "webhookPresenceUrl": "https://hooks.example.com/presence",
    "webhookReceivedUrl": "https://hooks.example.com/received",
    "automaticReading": False,
    "rejectCalls": True,
    "callMessage": "Não atendemos ligações",
    "created": 1718000000000,
    "isTrial": False,
    "paymentStatus": "paid",
    "expires": 1750000000000,
}


@dataclass
class RecordedRequest:
    method: str
    path: str
    params: dict[str, str]
    headers: httpx.Headers
    body: Any


@dataclass
class FakeWApi:
    """Responde sempre com o status/corpo configurado e grava as requisições.

    Um mesmo MockTransport atende clientes síncronos e assíncronos.
    """

    status_code: int = 200
    json_body: Any = field(
        default_factory=lambda: {
            "instanceId": INSTANCE_ID,
            "messageId": "3EB0ABC123",
            "insertedId": "ins-001",
        }
    )
    text_body: str | None = None
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(
        self,
        status_code: int,
        *,
        json_body: Any = None,
        text_body: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.json_body = json_body
        self.text_body = text_body

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handle)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]

    def _handle(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append(
            RecordedRequest(
                method=request.method,
                path=request.url.path,
                params=dict(request.url.params),
                headers=request.headers,
                body=body,
            )
        )
        if self.text_body is not None:
            return httpx.Response(self.status_code, text=self.text_body)
        return httpx.Response(self.status_code, json=self.json_body)


def build_request(kind: str) -> MessageRequest:
    """Requisição válida mínima para cada tipo de mensagem."""
    builders = {
        "text": lambda: TextMessageRequest(phone=VALID_PHONE, message="Olá!"),
        "image": lambda: ImageMessageRequest(
            phone=VALID_PHONE, image="https://cdn.example.com/foto.png"
        ),
        "audio": lambda: AudioMessageRequest(
            phone=VALID_PHONE, audio="https://cdn.example.com/audio.ogg"
        ),
        "video": lambda: VideoMessageRequest(
            phone=VALID_PHONE, video="https://cdn.example.com/video.mp4"
        ),
        "document": lambda: DocumentMessageRequest(
            phone=VALID_PHONE,
            document="https://cdn.example.com/boleto.pdf",
            extension="pdf",
        ),
    }
    return builders[kind]()
