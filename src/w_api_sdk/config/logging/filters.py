"""Filter que carimba service e correlation_id nos logs do SDK."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Associa cada log do SDK à requisição da aplicação que o originou.

    Args:
        service_name: Nome da aplicação hospedeira nos logs.
        correlation_id_getter: Retorna o correlation_id corrente da
            aplicação (ex: de um ContextVar). Sem getter, fica "".
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._correlation_id_getter = correlation_id_getter

    def filter(self, record: logging.LogRecord) -> bool:
        # extra={"correlation_id": ...} explícito vence o getter
        if not getattr(record, "correlation_id", None):
            getter = self._correlation_id_getter
            record.correlation_id = getter() if getter else ""
        record.service = self._service_name
        return True
