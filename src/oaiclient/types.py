"""Wire request/response models for the embeddings and chat completions endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class WireModel(BaseModel):
    """Base for every wire record.

    Unknown fields are ignored and missing or null fields fall back to the
    zero value of their type, so a bare ``{}`` decodes into an empty record.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Usage(WireModel):
    prompt_tokens: int = 0
    total_tokens: int = 0
    completion_tokens: int = 0


class Message(WireModel):
    role: str = ""
    content: str = ""


class EmbeddingRequest(WireModel):
    model: str = ""
    input: str = ""


class Embedding(WireModel):
    object: str = ""
    embedding: list[float] = Field(default_factory=list)
    index: int = 0


class EmbeddingResponse(WireModel):
    object: str = ""
    data: list[Embedding] = Field(default_factory=list)
    model: str = ""
    usage: Usage = Field(default_factory=Usage)


class CompletionRequest(WireModel):
    model: str = ""
    messages: list[Message] = Field(default_factory=list)


class Choice(WireModel):
    index: int = 0
    finish_reason: str = ""
    message: Message = Field(default_factory=Message)


class CompletionResponse(WireModel):
    id: str = ""
    object: str = ""
    model: str = ""
    created: int = 0
    choices: list[Choice] = Field(default_factory=list)
    usage: Usage = Field(default_factory=Usage)
