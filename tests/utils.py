from __future__ import annotations

import inspect
from typing import Any, AsyncIterator, Callable

import httpx


class TrackingStream(httpx.AsyncByteStream):
    """Response body that records whether it was released."""

    def __init__(self, body: bytes) -> None:
        self._body = body
        self.closed = False

    async def __aiter__(self) -> AsyncIterator[bytes]:
        yield self._body

    async def aclose(self) -> None:
        self.closed = True


class StubTransport:
    """Programmable transport: ``handler(request)`` returns a response or an exception."""

    def __init__(self, handler: Callable[[httpx.Request], Any]) -> None:
        self._handler = handler
        self.requests: list[httpx.Request] = []

    async def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self._handler(request)
        if inspect.isawaitable(result):
            result = await result
        if isinstance(result, BaseException):
            raise result
        return result


def make_response(status_code: int, body: str | bytes) -> tuple[httpx.Response, TrackingStream]:
    if isinstance(body, str):
        body = body.encode("utf-8")
    stream = TrackingStream(body)
    return httpx.Response(status_code, stream=stream), stream


def respond(status_code: int, body: str | bytes) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        response, _ = make_response(status_code, body)
        return response

    return handler
