"""Logging JSON opcional do SDK (python-json-logger).

Uso:
    from w_api_sdk.config.logging import configure_logging

    configure_logging(level="INFO", service_name="minha_app")
"""

from w_api_sdk.config.logging.config import configure_logging
from w_api_sdk.config.logging.filters import CorrelationIdFilter
from w_api_sdk.config.logging.formatters import (
    BASE_LOG_FIELDS,
    FIELD_RENAME_MAP,
    HTTP_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "BASE_LOG_FIELDS",
    "FIELD_RENAME_MAP",
    "HTTP_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
]
