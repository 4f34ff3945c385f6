"""Transport interface and factory."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    async def send(self, request: httpx.Request) -> httpx.Response:
        """Execute a single HTTP request and return its response."""


def create_transport(mode: str, **kwargs: Any) -> Transport:
    if mode == "mock":
        from oaiclient.mock import MockTransport

        return MockTransport(**kwargs)
    if mode == "openai":
        return httpx.AsyncClient(**kwargs)
    raise ValueError(f"Unsupported transport mode: {mode}")


async def close_transport(transport: Transport) -> None:
    aclose = getattr(transport, "aclose", None)
    if aclose is not None:
        await aclose()
