from __future__ import annotations

import math

import httpx
import pytest

from oaiclient.client import Client
from oaiclient.mock import MockTransport
from oaiclient.transport import Transport, close_transport, create_transport
from oaiclient.types import CompletionRequest, EmbeddingRequest, Message


@pytest.mark.asyncio
async def test_mock_embeddings_are_deterministic_unit_vectors() -> None:
    client = Client("unused", MockTransport(dims=16))
    request = EmbeddingRequest(model="mock-embed", input="hello world")

    first = await client.create_embedding(request)
    second = await client.create_embedding(request)
    other = await client.create_embedding(EmbeddingRequest(model="mock-embed", input="goodbye"))

    vector = first.data[0].embedding
    assert len(vector) == 16
    assert math.isclose(math.sqrt(sum(value * value for value in vector)), 1.0, rel_tol=1e-9)
    assert first == second
    assert other.data[0].embedding != vector
    assert first.model == "mock-embed"
    assert first.usage.total_tokens == first.usage.prompt_tokens


@pytest.mark.asyncio
async def test_mock_chat_completion() -> None:
    transport = MockTransport()
    client = Client("unused", transport)
    request = CompletionRequest(
        model="mock-chat",
        messages=[Message(role="system", content="be brief"), Message(role="user", content="hi")],
    )

    result = await client.create_chat_completion(request)

    assert result.object == "chat.completion"
    assert result.model == "mock-chat"
    assert result.choices[0].message.role == "assistant"
    assert "2 message(s)" in result.choices[0].message.content
    assert result.choices[0].finish_reason == "stop"
    assert result.usage.total_tokens == result.usage.prompt_tokens + result.usage.completion_tokens
    assert len(transport.requests) == 1


@pytest.mark.asyncio
async def test_mock_rejects_unknown_paths_and_bad_bodies() -> None:
    transport = MockTransport()

    not_found = await transport.send(httpx.Request("POST", "https://api.openai.com/v1/models", content=b"{}"))
    bad_body = await transport.send(httpx.Request("POST", "https://api.openai.com/v1/embeddings", content=b"nope"))
    wrong_method = await transport.send(httpx.Request("GET", "https://api.openai.com/v1/embeddings"))

    assert not_found.status_code == 404
    assert bad_body.status_code == 400
    assert wrong_method.status_code == 405


@pytest.mark.asyncio
async def test_create_transport_modes() -> None:
    mock = create_transport("mock", dims=8)
    remote = create_transport("openai", timeout=5.0)
    try:
        assert isinstance(mock, MockTransport)
        assert isinstance(remote, httpx.AsyncClient)
        assert isinstance(mock, Transport)
        assert isinstance(remote, Transport)
    finally:
        await close_transport(mock)
        await close_transport(remote)

    with pytest.raises(ValueError):
        create_transport("carrier-pigeon")
