"""Minimal .env loader for the oaiclient CLI."""

from __future__ import annotations

import os
from pathlib import Path


def parse_dotenv(text: str) -> dict[str, str]:
    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        if stripped.startswith("export "):
            stripped = stripped[len("export ") :].lstrip()
        if "=" not in stripped:
            continue
        key, value = stripped.split("=", 1)
        key = key.strip()
        value = value.strip()
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        if value == "":
            continue
        values[key] = value
    return values


def load_dotenv(path: str | Path = ".env") -> list[str]:
    """Load ``KEY=VALUE`` pairs into the environment; existing variables win.

    Returns the keys that were actually set.
    """
    env_path = Path(path)
    if not env_path.exists():
        return []
    try:
        text = env_path.read_text(encoding="utf-8")
    except OSError:
        return []

    loaded: list[str] = []
    for key, value in parse_dotenv(text).items():
        if key not in os.environ:
            os.environ[key] = value
            loaded.append(key)
    return loaded
