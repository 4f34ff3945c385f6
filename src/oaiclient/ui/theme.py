"""Rich theme for the oaiclient CLI."""

from __future__ import annotations

from rich.theme import Theme

THEME = Theme(
    {
        "accent": "bright_blue",
        "title": "bold bright_blue",
        "info": "dim",
        "warning": "red3",
        "error": "bold red3",
        "label": "dim",
        "value": "white",
        "border": "bright_black",
    }
)
