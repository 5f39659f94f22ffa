"""Configuração do SDK: settings e logging."""

from w_api_sdk.config.settings import WApiSettings, get_w_api_settings

__all__ = [
    "WApiSettings",
    "get_w_api_settings",
]
