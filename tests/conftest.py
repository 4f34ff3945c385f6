from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from oaiclient.client import Client
from tests.utils import StubTransport


@pytest.fixture
def stub_client() -> Callable[..., tuple[Client, StubTransport]]:
    def build(handler: Callable[[httpx.Request], Any], **kwargs: Any) -> tuple[Client, StubTransport]:
        transport = StubTransport(handler)
        return Client("test_api_key", transport, **kwargs), transport

    return build


@pytest.fixture
def clean_openai_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv before delenv so teardown also removes keys that load_dotenv set
    for key in ("OPENAI_API_KEY", "OPENAI_BASE_URL", "OPENAI_TIMEOUT_S", "OAICLIENT_LOG_LEVEL"):
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
