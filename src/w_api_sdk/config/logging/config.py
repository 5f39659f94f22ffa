"""Saída JSON opcional para os logs do SDK.

O SDK só emite logs (logger `w_api_sdk` e filhos) e, por padrão, fica
silencioso. `configure_logging` liga uma saída JSON apenas nessa árvore de
loggers; o root logger e os handlers da aplicação não são tocados.

Uso:
    from w_api_sdk.config.logging import configure_logging

    configure_logging(level="INFO", service_name="minha_app",
                      correlation_id_getter=get_correlation_id)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from w_api_sdk.config.logging.filters import CorrelationIdFilter
from w_api_sdk.config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

SDK_LOGGER_NAME = "w_api_sdk"

DEFAULT_SERVICE_NAME = "w_api_sdk"


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Envia os logs do SDK em JSON para `stream` (stderr por padrão).

    Chamadas repetidas substituem a configuração anterior. Os logs do SDK
    deixam de propagar para o root, evitando linhas duplicadas quando a
    aplicação também tem handlers lá.

    Args:
        level: Nível mínimo (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome da aplicação hospedeira nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual.
        stream: Destino das linhas JSON.

    Returns:
        O logger raiz do SDK já configurado.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    sdk_logger = logging.getLogger(SDK_LOGGER_NAME)
    sdk_logger.setLevel(level_upper)
    sdk_logger.handlers = [handler]
    sdk_logger.propagate = False
    return sdk_logger
