"""Markdown to sanitized HTML conversion."""

from __future__ import annotations

import logging
from typing import Optional

import markdown

from faqrender.content.sanitize import sanitize_html
from faqrender.utils.text import escape_html

logger = logging.getLogger(__name__)

# nl2br gives GFM-style line breaks on a single newline
MARKDOWN_EXTENSIONS = ["extra", "nl2br", "sane_lists"]


def render_markdown(text: Optional[str]) -> str:
    """Convert Markdown to HTML without sanitizing it.

    Only used to compare the raw rendering against the sanitized one;
    never hand this output to a page.
    """
    if not text:
        return ""
    return markdown.markdown(text, extensions=MARKDOWN_EXTENSIONS)


def markdown_to_html(text: Optional[str], log: Optional[logging.Logger] = None) -> str:
    """Convert Markdown to HTML and run it through the HTML sanitizer.

    Raw HTML inside the Markdown passes through the same allow-list.
    If the Markdown engine fails, the source comes back escaped.
    """
    if not text:
        return ""
    log = log or logger

    try:
        html = render_markdown(text)
    except Exception:
        log.error("Error parsing markdown", exc_info=True)
        return escape_html(text)

    return sanitize_html(html, log=log)
