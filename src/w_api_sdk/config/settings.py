"""Settings do SDK W-API.

Valores padrão apontam para a API pública; a aplicação hospedeira pode
passar um WApiSettings explícito ou usar variáveis de ambiente W_API_*.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

W_API_BASE_URL: str = "https://api.w-api.app/v1"
DEFAULT_TIMEOUT_SECONDS: float = 30.0

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True)
class WApiSettings:
    """Configurações de acesso à W-API.

    Attributes:
        base_url: URL base da API (sem barra final)
        request_timeout_seconds: Timeout para requisições HTTP
        verify_ssl: Se o certificado TLS do servidor deve ser verificado
    """

    base_url: str = W_API_BASE_URL
    request_timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    verify_ssl: bool = True

    def validate(self) -> list[str]:
        """Valida configurações mínimas.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.base_url:
            errors.append("W_API_BASE_URL não configurado")
        elif not self.base_url.startswith(("http://", "https://")):
            errors.append("W_API_BASE_URL deve começar com http:// ou https://")

        if self.request_timeout_seconds <= 0:
            errors.append("W_API_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> WApiSettings:
    """Carrega WApiSettings a partir de variáveis de ambiente."""
    return WApiSettings(
        base_url=os.getenv("W_API_BASE_URL", W_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(
            os.getenv("W_API_REQUEST_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        ),
        verify_ssl=os.getenv("W_API_VERIFY_SSL", "true").strip().lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_w_api_settings() -> WApiSettings:
    """Retorna instância cacheada de WApiSettings carregada do ambiente."""
    return _load_from_env()
