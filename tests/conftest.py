"""Configuração do pytest para o w_api_sdk."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para rodar sem instalação
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from tests.fakes.fake_w_api import FakeWApi  # noqa: E402
from w_api_sdk.config.settings import WApiSettings  # noqa: E402
from w_api_sdk.http.client import WApiHttpClient, create_http_client  # noqa: E402


@pytest.fixture
def fake_api() -> FakeWApi:
    return FakeWApi()


@pytest.fixture
def http_client(fake_api: FakeWApi) -> WApiHttpClient:
    transport = fake_api.transport()
    return create_http_client(
        WApiSettings(),
        transport=transport,
        async_transport=transport,
    )
