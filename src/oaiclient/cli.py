"""CLI entrypoint for oaiclient."""

from __future__ import annotations

import asyncio
from enum import Enum
import json
from typing import Awaitable, Callable, Optional, TypeVar

import typer

from oaiclient.client import CHAT_COMPLETIONS_PATH, EMBEDDINGS_PATH, Client
from oaiclient.config import DEFAULT_CHAT_MODEL, DEFAULT_EMBEDDING_MODEL, ClientSettings
from oaiclient.env import load_dotenv
from oaiclient.errors import OpenAIClientError
from oaiclient.logging import configure_logging
from oaiclient.transport import close_transport, create_transport
from oaiclient.types import CompletionRequest, EmbeddingRequest, Message
from oaiclient.ui.progress import status_spinner
from oaiclient.ui.render import (
    format_vector_preview,
    render_error,
    render_info,
    render_json,
    render_message,
    render_summary_table,
    render_warning,
)

T = TypeVar("T")

app = typer.Typer(add_completion=False, help="Embeddings and chat completions from the command line.")


class RequestKind(str, Enum):
    embedding = "embedding"
    chat = "chat"


@app.callback(invoke_without_command=True)
def root(
    ctx: typer.Context,
    env_file: str = typer.Option(".env", "--env-file", help="Dotenv file loaded before anything else."),
) -> None:
    """oaiclient command line."""
    load_dotenv(env_file)
    configure_logging(ClientSettings.from_env().log_level)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)


@app.command("embed")
def embed(
    text: str = typer.Argument(..., help="Text to embed."),
    model: str = typer.Option(DEFAULT_EMBEDDING_MODEL, "--model", "-m"),
    mock: bool = typer.Option(False, "--mock", help="Answer from the offline mock transport."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
) -> None:
    """Create an embedding and show a summary of the vector."""
    settings = _resolve_settings(mock)
    request = EmbeddingRequest(model=model, input=text)
    response = _execute(
        settings,
        mock,
        lambda client: client.create_embedding(request, timeout=timeout),
        f"Embedding with {model}",
    )

    if not response.data:
        render_warning("Response contained no embeddings.")
        return
    vector = response.data[0].embedding
    render_summary_table(
        [
            ("model", response.model),
            ("dimensions", len(vector)),
            ("vector", format_vector_preview(vector)),
            ("prompt tokens", response.usage.prompt_tokens),
            ("total tokens", response.usage.total_tokens),
        ],
        title="Embedding",
    )


@app.command("chat")
def chat(
    message: str = typer.Argument(..., help="User message."),
    model: str = typer.Option(DEFAULT_CHAT_MODEL, "--model", "-m"),
    system: Optional[str] = typer.Option(None, "--system", "-s", help="Optional system prompt."),
    mock: bool = typer.Option(False, "--mock", help="Answer from the offline mock transport."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="Request timeout in seconds."),
) -> None:
    """Send a single-turn conversation and print the reply."""
    settings = _resolve_settings(mock)
    request = CompletionRequest(model=model, messages=_build_messages(message, system))
    response = _execute(
        settings,
        mock,
        lambda client: client.create_chat_completion(request, timeout=timeout),
        f"Chatting with {model}",
    )

    if not response.choices:
        render_warning("Response contained no choices.")
        return
    choice = response.choices[0]
    render_message(choice.message.role, choice.message.content)
    render_summary_table(
        [
            ("model", response.model),
            ("finish reason", choice.finish_reason or "n/a"),
            ("prompt tokens", response.usage.prompt_tokens),
            ("completion tokens", response.usage.completion_tokens),
            ("total tokens", response.usage.total_tokens),
        ],
        title="Usage",
    )


@app.command("preview")
def preview(
    kind: RequestKind = typer.Argument(..., help="Which endpoint to build a request for."),
    text: str = typer.Argument(..., help="Input text or user message."),
    model: Optional[str] = typer.Option(None, "--model", "-m"),
    system: Optional[str] = typer.Option(None, "--system", "-s"),
) -> None:
    """Build and display a request body without network access."""
    settings = ClientSettings.from_env()
    client = Client.from_settings(settings, create_transport("mock"))
    if kind is RequestKind.embedding:
        payload = EmbeddingRequest(model=model or DEFAULT_EMBEDDING_MODEL, input=text)
        path = EMBEDDINGS_PATH
    else:
        payload = CompletionRequest(model=model or DEFAULT_CHAT_MODEL, messages=_build_messages(text, system))
        path = CHAT_COMPLETIONS_PATH

    try:
        request = client.build_request(path, payload)
    except OpenAIClientError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)
    render_info(f"{request.method} {request.url}")
    render_json(json.loads(request.content))


def _resolve_settings(mock: bool) -> ClientSettings:
    settings = ClientSettings.from_env()
    if not mock and not settings.api_key_present:
        render_error("OPENAI_API_KEY is required unless --mock is given.")
        raise typer.Exit(code=1)
    return settings


def _build_messages(text: str, system: str | None) -> list[Message]:
    messages = []
    if system:
        messages.append(Message(role="system", content=system))
    messages.append(Message(role="user", content=text))
    return messages


def _execute(
    settings: ClientSettings,
    mock: bool,
    call: Callable[[Client], Awaitable[T]],
    status: str,
) -> T:
    try:
        with status_spinner(status):
            return asyncio.run(_run_call(settings, mock, call))
    except OpenAIClientError as exc:
        render_error(str(exc))
        raise typer.Exit(code=1)


async def _run_call(settings: ClientSettings, mock: bool, call: Callable[[Client], Awaitable[T]]) -> T:
    if mock:
        transport = create_transport("mock")
    else:
        transport = create_transport("openai", timeout=settings.timeout_s)
    client = Client.from_settings(settings, transport)
    try:
        return await call(client)
    finally:
        await close_transport(transport)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
