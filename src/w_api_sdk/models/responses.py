"""Modelos de resposta da W-API (somente leitura)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class InstanceResponse(_ResponseModel):
    """Snapshot de uma instância: identidade, conexão, contadores e webhooks.

    `created` e `expires` são timestamps epoch, como enviados pela API.
    """

    # Identificação
    instance_id: str | None = Field(default=None, alias="instanceId")
    instance_name: str | None = Field(default=None, alias="instanceName")
    token: str | None = None

    # Conexão
    connected: bool | None = None
    connected_phone: str | None = Field(default=None, alias="connectedPhone")

    # Contadores
    contacts: int | None = None
    chats: int | None = None
    messages_sent: int | None = Field(default=None, alias="messagesSent")
    messages_received: int | None = Field(default=None, alias="messagesReceived")

    # Webhooks
    webhook_connected_url: str | None = Field(default=None, alias="webhookConnectedUrl")
    webhook_delivery_url: str | None = Field(default=None, alias="webhookDeliveryUrl")
    webhook_disconnected_url: str | None = Field(default=None, alias="webhookDisconnectedUrl")
    webhook_status_url: str | None = Field(default=None, alias="webhookStatusUrl")
    webhook_presence_url: str | None = Field(default=None, alias="webhookPresenceUrl")
    webhook_received_url: str | None = Field(default=None, alias="webhookReceivedUrl")

    # Chamadas e leitura
    automatic_reading: bool | None = Field(default=None, alias="automaticReading")
    reject_calls: bool | None = Field(default=None, alias="rejectCalls")
    call_message: str | None = Field(default=None, alias="callMessage")

    # Plano
    created: int | None = None
    is_trial: bool | None = Field(default=None, alias="isTrial")
    payment_status: str | None = Field(default=None, alias="paymentStatus")
    expires: int | None = None


class MessageResponse(_ResponseModel):
    """Confirmação de envio de mensagem."""

    instance_id: str | None = Field(default=None, alias="instanceId")
    message_id: str = Field(..., alias="messageId")
    inserted_id: str | None = Field(default=None, alias="insertedId")
