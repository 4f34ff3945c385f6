from __future__ import annotations

import json
import logging

import pytest

from oaiclient.logging import configure_logging, get_logger
from oaiclient.types import EmbeddingRequest
from oaiclient.errors import UnexpectedStatusError
from tests.utils import respond


def test_get_logger_renders_json_and_respects_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("tests.logging_probe")

    with caplog.at_level(logging.INFO, logger="tests.logging_probe"):
        logger.debug("hidden")
        logger.info("shown", answer=42)

    messages = [json.loads(record.getMessage()) for record in caplog.records]
    assert [message["event"] for message in messages] == ["shown"]
    assert messages[0]["answer"] == 42
    assert messages[0]["level"] == "info"
    assert messages[0]["logger"] == "tests.logging_probe"


def test_configure_logging_is_idempotent() -> None:
    configure_logging("INFO")
    handlers = list(logging.getLogger("oaiclient").handlers)
    configure_logging("DEBUG")
    assert logging.getLogger("oaiclient").handlers == handlers
    assert logging.getLogger("httpx").level == logging.WARNING


@pytest.mark.asyncio
async def test_client_failure_is_logged_without_api_key(
    stub_client, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setattr(logging.getLogger("oaiclient"), "propagate", True)
    client, _ = stub_client(respond(503, "{}"))

    with caplog.at_level(logging.DEBUG, logger="oaiclient.client"):
        with pytest.raises(UnexpectedStatusError):
            await client.create_embedding(EmbeddingRequest(model="m"))

    events = [json.loads(record.getMessage()) for record in caplog.records if record.name == "oaiclient.client"]
    assert [event["event"] for event in events] == ["sending request", "unexpected status"]
    assert events[1]["status_code"] == 503
    assert events[1]["endpoint"] == "/embeddings"
    assert all("test_api_key" not in record.getMessage() for record in caplog.records)
