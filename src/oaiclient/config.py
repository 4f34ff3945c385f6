"""Client settings and their resolution from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

DEFAULT_BASE_URL = "https://api.openai.com/v1"
DEFAULT_TIMEOUT_S = 60.0
DEFAULT_EMBEDDING_MODEL = "text-embedding-3-small"
DEFAULT_CHAT_MODEL = "gpt-4o-mini"


@dataclass(frozen=True)
class ClientSettings:
    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float | None = DEFAULT_TIMEOUT_S
    log_level: str = "WARNING"

    @classmethod
    def from_env(
        cls,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_s: float | None = None,
        log_level: str | None = None,
    ) -> "ClientSettings":
        """Explicit arguments win, then ``OPENAI_*`` variables, then defaults."""
        resolved_timeout = timeout_s
        if resolved_timeout is None:
            raw_timeout = os.getenv("OPENAI_TIMEOUT_S")
            if raw_timeout:
                try:
                    resolved_timeout = float(raw_timeout)
                except ValueError as exc:
                    raise ValueError(f"OPENAI_TIMEOUT_S must be a number, got {raw_timeout!r}.") from exc
            else:
                resolved_timeout = DEFAULT_TIMEOUT_S
        if resolved_timeout <= 0:
            resolved_timeout = None

        return cls(
            api_key=api_key if api_key is not None else os.getenv("OPENAI_API_KEY", ""),
            base_url=(base_url or os.getenv("OPENAI_BASE_URL") or DEFAULT_BASE_URL).rstrip("/"),
            timeout_s=resolved_timeout,
            log_level=log_level or os.getenv("OAICLIENT_LOG_LEVEL", "WARNING"),
        )

    @property
    def api_key_present(self) -> bool:
        return bool(self.api_key)

    def to_dict(self) -> dict:
        return {
            "api_key": "***" if self.api_key else "",
            "base_url": self.base_url,
            "timeout_s": self.timeout_s,
            "log_level": self.log_level,
        }
