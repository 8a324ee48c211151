"""Format dispatch: turn FAQ content of any format into safe HTML."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from faqrender.content.markdown import markdown_to_html, render_markdown
from faqrender.content.sanitize import sanitize_html
from faqrender.core.models import (
    FORMAT_LABELS,
    ContentFormat,
    FAQItem,
    FormatLike,
    RenderedItem,
    SanitizationCheck,
    coerce_format,
)
from faqrender.utils.text import normalize_whitespace, text_to_html
from faqrender.validation.warnings import get_content_warnings

logger = logging.getLogger(__name__)


def process_content(
    content: Optional[str],
    fmt: FormatLike,
    log: Optional[logging.Logger] = None,
) -> str:
    """Render content as sanitized HTML according to its format.

    Unknown formats are sanitized as HTML rather than passed through.
    Never raises; output is identical for identical input.
    """
    if not content:
        return ""
    log = log or logger

    content_format = coerce_format(fmt)
    if content_format is None:
        log.warning('Unrecognized content format "%s", treating as HTML', fmt)
        content_format = ContentFormat.HTML

    log.debug("Processing %d chars as %s", len(content), content_format.value)

    if content_format is ContentFormat.TEXT:
        return text_to_html(content)
    if content_format is ContentFormat.MARKDOWN:
        return markdown_to_html(content, log=log)
    return sanitize_html(content, log=log)


def format_label(fmt: FormatLike) -> str:
    """Short badge for a format: HTML, MD or TXT."""
    content_format = coerce_format(fmt) or ContentFormat.HTML
    return FORMAT_LABELS[content_format]


def check_sanitization(content: Optional[str], fmt: FormatLike) -> SanitizationCheck:
    """Report whether sanitizing would change the HTML the author wrote."""
    content_format = coerce_format(fmt)
    if not content or content_format is ContentFormat.TEXT:
        return SanitizationCheck()

    original_html = content
    if content_format is ContentFormat.MARKDOWN:
        try:
            original_html = render_markdown(content)
        except Exception:
            logger.error("Error parsing markdown", exc_info=True)

    sanitized_html = sanitize_html(original_html)
    return SanitizationCheck(
        modified=normalize_whitespace(original_html) != normalize_whitespace(sanitized_html),
        original_html=original_html,
        sanitized_html=sanitized_html,
    )


def render_item(item: FAQItem) -> RenderedItem:
    """Render one FAQ entry with its warnings and modification flag."""
    return RenderedItem(
        summary=item.summary,
        format=item.format,
        label=format_label(item.format),
        html=process_content(item.content, item.format),
        warnings=get_content_warnings(item.content, item.format),
        modified=check_sanitization(item.content, item.format).modified,
    )


def render_items(items: Iterable[FAQItem]) -> list[RenderedItem]:
    return [render_item(item) for item in items]
