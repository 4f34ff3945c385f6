"""Async client for OpenAI-compatible embeddings and chat completions endpoints."""

__version__ = "0.1.0"

from oaiclient.client import Client
from oaiclient.config import ClientSettings
from oaiclient.errors import (
    DecodeError,
    OpenAIClientError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from oaiclient.mock import MockTransport
from oaiclient.transport import Transport, create_transport
from oaiclient.types import (
    Choice,
    CompletionRequest,
    CompletionResponse,
    Embedding,
    EmbeddingRequest,
    EmbeddingResponse,
    Message,
    Usage,
)

__all__ = [
    "Choice",
    "Client",
    "ClientSettings",
    "CompletionRequest",
    "CompletionResponse",
    "DecodeError",
    "Embedding",
    "EmbeddingRequest",
    "EmbeddingResponse",
    "Message",
    "MockTransport",
    "OpenAIClientError",
    "RequestConstructionError",
    "SerializationError",
    "Transport",
    "TransportError",
    "UnexpectedStatusError",
    "Usage",
    "create_transport",
]
