"""Mock transport for offline use and testing."""

from __future__ import annotations

import asyncio
import hashlib
import json
import math
import random
import time
from typing import Any

import httpx


class MockTransport:
    """Answers embeddings and chat completions requests without network access.

    Responses are derived from a hash of the request, so the same request
    always yields the same payload.
    """

    def __init__(self, *, dims: int = 1536, latency_ms: int = 0) -> None:
        self._dims = dims
        self._latency_ms = latency_ms
        self.requests: list[httpx.Request] = []

    async def send(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._latency_ms > 0:
            await asyncio.sleep(self._latency_ms / 1000.0)

        if request.method != "POST":
            return httpx.Response(405, request=request)
        try:
            body = json.loads(request.content or b"null")
        except ValueError:
            return httpx.Response(400, request=request)
        if not isinstance(body, dict):
            return httpx.Response(400, request=request)

        path = request.url.path
        if path.endswith("/embeddings"):
            return httpx.Response(200, json=self._embedding_payload(body), request=request)
        if path.endswith("/chat/completions"):
            return httpx.Response(200, json=self._completion_payload(body), request=request)
        return httpx.Response(404, request=request)

    async def aclose(self) -> None:
        return None

    def _embedding_payload(self, body: dict[str, Any]) -> dict[str, Any]:
        model = str(body.get("model") or "")
        text = str(body.get("input") or "")
        seed = int.from_bytes(_stable_seed(model, text)[:4], "big")
        rng = random.Random(seed)
        vec = [rng.gauss(0, 1) for _ in range(self._dims)]
        norm = math.sqrt(sum(value * value for value in vec)) or 1.0
        prompt_tokens = _count_tokens(text)
        return {
            "object": "list",
            "data": [
                {
                    "object": "embedding",
                    "embedding": [value / norm for value in vec],
                    "index": 0,
                }
            ],
            "model": model,
            "usage": {
                "prompt_tokens": prompt_tokens,
                "total_tokens": prompt_tokens,
                "completion_tokens": 0,
            },
        }

    def _completion_payload(self, body: dict[str, Any]) -> dict[str, Any]:
        model = str(body.get("model") or "")
        messages = body.get("messages") or []
        prompt_text = " ".join(str(message.get("content", "")) for message in messages if isinstance(message, dict))
        digest = _stable_seed(model, prompt_text)
        text = f"Mock reply from {model or 'unknown model'} to {len(messages)} message(s)."
        prompt_tokens = _count_tokens(prompt_text)
        completion_tokens = _count_tokens(text)
        return {
            "id": f"chatcmpl-mock-{digest.hex()[:12]}",
            "object": "chat.completion",
            "model": model,
            "created": int(time.time()),
            "choices": [
                {
                    "index": 0,
                    "finish_reason": "stop",
                    "message": {"role": "assistant", "content": text},
                }
            ],
            "usage": {
                "prompt_tokens": prompt_tokens,
                "total_tokens": prompt_tokens + completion_tokens,
                "completion_tokens": completion_tokens,
            },
        }


def _stable_seed(model: str, text: str) -> bytes:
    return hashlib.sha256((model + "|" + text).encode("utf-8")).digest()


def _count_tokens(text: str) -> int:
    return max(1, len(text) // 4)
