"""
Client for the embeddings and chat completions endpoints.

Both calls run the same pipeline: serialize the request model, build a POST
with auth and content headers, hand it to the injected transport, then check
the status and decode the body into the response model.
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from oaiclient.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_S, ClientSettings
from oaiclient.errors import (
    DecodeError,
    RequestConstructionError,
    SerializationError,
    TransportError,
    UnexpectedStatusError,
)
from oaiclient.logging import get_logger
from oaiclient.transport import Transport
from oaiclient.types import (
    CompletionRequest,
    CompletionResponse,
    EmbeddingRequest,
    EmbeddingResponse,
)

logger = get_logger(__name__)

EMBEDDINGS_PATH = "/embeddings"
CHAT_COMPLETIONS_PATH = "/chat/completions"

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class Client:
    """
    Client for an OpenAI-compatible REST API.

    The client keeps only the API key, the base URL and a reference to the
    transport, so one instance can serve concurrent calls. It never closes
    the transport; whoever created it owns it.
    """

    def __init__(
        self,
        api_key: str,
        transport: Transport,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout_s: float | None = DEFAULT_TIMEOUT_S,
    ) -> None:
        """
        Args:
            api_key: Sent as ``Authorization: Bearer <api_key>``; not validated
            transport: Anything with ``async send(httpx.Request) -> httpx.Response``
            base_url: API root the endpoint paths are appended to
            timeout_s: Default per-request timeout passed to the transport,
                ``None`` leaves it to the transport
        """
        self._api_key = api_key
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._timeout_s = timeout_s

    @classmethod
    def from_settings(cls, settings: ClientSettings, transport: Transport) -> "Client":
        """Build a client from settings. The caller keeps ownership of ``transport`` and closes it."""
        return cls(
            settings.api_key,
            transport,
            base_url=settings.base_url,
            timeout_s=settings.timeout_s,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    def __repr__(self) -> str:
        return f"Client(base_url={self._base_url!r}, transport={type(self._transport).__name__})"

    async def create_embedding(
        self,
        request: EmbeddingRequest,
        *,
        timeout: float | None = None,
    ) -> EmbeddingResponse:
        """
        Create an embedding for the request's input text.

        Args:
            request: Model and input text
            timeout: Deadline in seconds for this call, overriding the client default

        Returns:
            EmbeddingResponse decoded from a 200 response

        Raises:
            SerializationError, RequestConstructionError, TransportError,
            UnexpectedStatusError, DecodeError
        """
        return await self._post(EMBEDDINGS_PATH, request, EmbeddingResponse, timeout=timeout)

    async def create_chat_completion(
        self,
        request: CompletionRequest,
        *,
        timeout: float | None = None,
    ) -> CompletionResponse:
        """
        Create a chat completion for the request's messages.

        Messages are sent as given; roles and ordering are validated by the
        server only. Raises the same errors as ``create_embedding``.
        """
        return await self._post(CHAT_COMPLETIONS_PATH, request, CompletionResponse, timeout=timeout)

    def build_request(self, path: str, payload: BaseModel, *, timeout: float | None = None) -> httpx.Request:
        """Build the POST request for ``path`` without sending it."""
        try:
            content = payload.model_dump_json().encode("utf-8")
        except PydanticSerializationError as exc:
            raise SerializationError(f"could not marshal data: {exc}", endpoint=path) from exc

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        effective_timeout = timeout if timeout is not None else self._timeout_s
        extensions = {}
        if effective_timeout is not None:
            extensions["timeout"] = httpx.Timeout(effective_timeout).as_dict()

        try:
            return httpx.Request(
                "POST",
                f"{self._base_url}{path}",
                content=content,
                headers=headers,
                extensions=extensions,
            )
        except httpx.InvalidURL as exc:
            raise RequestConstructionError(f"could not create request: {exc}", endpoint=path) from exc

    async def _post(
        self,
        path: str,
        payload: BaseModel,
        response_model: type[ResponseT],
        *,
        timeout: float | None = None,
    ) -> ResponseT:
        request = self.build_request(path, payload, timeout=timeout)
        log = logger.bind(endpoint=path, model=getattr(payload, "model", None))
        log.debug("sending request")

        try:
            response = await self._transport.send(request)
        except (httpx.HTTPError, OSError) as exc:
            log.info("transport failure", error=type(exc).__name__)
            raise TransportError(f"could not send request: {exc}", endpoint=path) from exc

        try:
            if response.status_code != httpx.codes.OK:
                log.info("unexpected status", status_code=response.status_code)
                raise UnexpectedStatusError(response.status_code, endpoint=path)
            try:
                body = await response.aread()
            except (httpx.HTTPError, OSError) as exc:
                log.info("transport failure", error=type(exc).__name__)
                raise TransportError(f"could not read response: {exc}", endpoint=path) from exc
            try:
                decoded = response_model.model_validate_json(body, strict=True)
            except ValidationError as exc:
                log.info("decode failure", errors=exc.error_count())
                raise DecodeError(f"could not decode response: {exc}", endpoint=path) from exc
        finally:
            await response.aclose()

        log.debug("request succeeded")
        return decoded
