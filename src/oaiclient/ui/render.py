"""Render helpers for the oaiclient CLI."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from oaiclient.ui.console import get_console


def render_info(text: str) -> None:
    console = get_console()
    console.print(text, style="info", markup=False)


def render_warning(text: str) -> None:
    console = get_console()
    console.print(text, style="warning", markup=False)


def render_error(text: str) -> None:
    console = get_console()
    panel = Panel(
        Text(text, style="error"),
        box=box.ROUNDED,
        border_style="error",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_summary_table(rows: Mapping[str, Any] | Sequence[tuple[str, Any]], title: str = "Summary") -> None:
    console = get_console()
    table = Table(
        show_header=False,
        box=None,
        pad_edge=False,
    )
    table.add_column(style="label", no_wrap=True, justify="right")
    table.add_column(style="value")

    items = rows.items() if hasattr(rows, "items") else rows
    for key, value in items:
        table.add_row(Text(str(key), style="label"), Text(str(value), style="value"))

    panel = Panel(
        table,
        title=Text(title, style="title"),
        title_align="left",
        border_style="border",
        box=box.ROUNDED,
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_message(role: str, content: str) -> None:
    console = get_console()
    panel = Panel(
        Text(content, style="value"),
        title=Text(role or "message", style="accent"),
        title_align="left",
        box=box.ROUNDED,
        border_style="border",
        padding=(0, 2),
        expand=True,
    )
    console.print(panel)


def render_json(payload: Any) -> None:
    # Plain print keeps the output machine-readable.
    print(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=True))


def format_vector_preview(vector: Sequence[float], limit: int = 5) -> str:
    head = ", ".join(f"{value:.4f}" for value in vector[:limit])
    if len(vector) > limit:
        return f"[{head}, ... +{len(vector) - limit}]"
    return f"[{head}]"
