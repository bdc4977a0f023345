#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict

from prompt_toolkit.styles import Style


THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "text.dimmer": "#6d717a",
        "selected": "bg:#3b3b3b #d7dfe6 bold",
        "selected.unfocused": "#d7dfe6 bold",
        "header": "#ffb347 bold",
        "border": "#4b525a",
        "border.focus": "#9ad974",
        "prompt": "bg:#1f2226",
        "prompt.value": "#e8eaec bold",
        "prompt.counter": "#97a0a9",
        "prompt.counter.full": "#e06c75 bold",
        "bindings": "#61afef",
        "error": "#e06c75 bold",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "text.dimmer": "#6f757d",
        "selected": "bg:#3d4047 #e8eaec bold",
        "selected.unfocused": "#e8eaec bold",
        "header": "#ffb347 bold",
        "border": "#5a6169",
        "border.focus": "#b8f171",
        "prompt": "bg:#16181b",
        "prompt.value": "#ffffff bold",
        "prompt.counter": "#a7b0ba",
        "prompt.counter.full": "#ff6b6b bold",
        "bindings": "#6cb6ff",
        "error": "#ff6b6b bold",
    },
}

DEFAULT_THEME = "dark-olive"


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Get theme palette, falling back to default if theme not found."""
    base = THEMES.get(theme)
    if not base:
        base = THEMES[DEFAULT_THEME]
    return dict(base)


def build_style(theme: str) -> Style:
    """Build Style object from theme name."""
    palette = get_theme_palette(theme)
    return Style.from_dict(palette)
