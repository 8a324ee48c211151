"""Text formatting helpers."""

from __future__ import annotations

import html
import re
from typing import Optional


def escape_html(text: Optional[str]) -> str:
    """Escape &, <, > and both quote characters."""
    if not text:
        return ""
    return html.escape(text, quote=True)


def text_to_html(text: Optional[str]) -> str:
    """Escape plain text and turn every newline into a <br>."""
    if not text:
        return ""
    return escape_html(text).replace("\n", "<br>")


def excerpt(text: str, max_length: int = 50, suffix: str = "...") -> str:
    """Cut text to max_length characters, appending suffix when something was cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to a single space and trim."""
    return re.sub(r"\s+", " ", text).strip()
