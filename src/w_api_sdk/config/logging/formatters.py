"""Formatter JSON dos logs do SDK.

Toda linha traz os campos base e os campos HTTP que `w_api_sdk.http.logging`
emite via `extra`. Campos HTTP ausentes no record saem como null, para que o
esquema da linha não dependa do evento.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

BASE_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Mesmos nomes usados em log_http_error / log_success
HTTP_LOG_FIELDS: tuple[str, ...] = (
    "method",
    "path",
    "status_code",
    "response_body",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria o formatter com campos base + HTTP.

    Exemplo de linha para um 500 da W-API:
        {"asctime": "...", "level": "ERROR", "logger": "w_api_sdk.http.logging",
         "message": "w_api_http_error", "correlation_id": "abc-123",
         "service": "w_api_sdk", "method": "POST", "path": "/message/send-text",
         "status_code": 500, "response_body": "{\\"error\\":\\"bad\\"}"}
    """
    fields = BASE_LOG_FIELDS + HTTP_LOG_FIELDS
    return JsonFormatter(
        " ".join(f"%({name})s" for name in fields),
        rename_fields=FIELD_RENAME_MAP,
    )
