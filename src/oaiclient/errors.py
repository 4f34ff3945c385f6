"""
Exception classes for the oaiclient package.

Every failure of a client call is raised as a subclass of
``OpenAIClientError``; nothing is recovered locally.
"""

from __future__ import annotations


class OpenAIClientError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, *, endpoint: str | None = None):
        super().__init__(message)
        self.endpoint = endpoint


class SerializationError(OpenAIClientError):
    """Raised when a request model could not be encoded to JSON."""

    pass


class RequestConstructionError(OpenAIClientError):
    """Raised when the outgoing HTTP request could not be built (bad URL or method)."""

    pass


class TransportError(OpenAIClientError):
    """
    Raised when the transport fails to complete the exchange.

    The underlying httpx exception (connect error, timeout, read error, ...)
    is available as ``__cause__``.
    """

    pass


class UnexpectedStatusError(OpenAIClientError):
    """Raised when the server answers with any status other than 200.

    The response body is discarded; only the status code is kept.
    """

    def __init__(self, status_code: int, *, endpoint: str | None = None):
        super().__init__(f"unexpected status code: {status_code}", endpoint=endpoint)
        self.status_code = status_code


class DecodeError(OpenAIClientError):
    """Raised when a 200 response body is not valid JSON for the expected model."""

    pass
