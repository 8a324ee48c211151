"""Author-facing warnings for FAQ content, per format."""

from __future__ import annotations

import re
from typing import Optional

from faqrender.core.models import ContentFormat, FormatLike, coerce_format
from faqrender.validation.security import validate_html
from faqrender.validation.syntax import validate_html_syntax

EMBEDDED_HTML_PREFIX = "Embedded HTML in markdown: "

_HTML_TOKEN = re.compile(r"<[^>]+>")


def _html_warnings(html: str) -> list[str]:
    return validate_html(html) + validate_html_syntax(html)


def get_content_warnings(content: Optional[str], fmt: FormatLike) -> list[str]:
    """List issues in content without changing it.

    Security warnings come before syntax warnings. Markdown is only
    checked for the raw HTML tags embedded in it; plain Markdown syntax
    never produces a warning. Text and unknown formats are not checked.
    """
    if not content:
        return []

    content_format = coerce_format(fmt)
    if content_format is ContentFormat.HTML:
        return _html_warnings(content)

    if content_format is ContentFormat.MARKDOWN:
        tags = _HTML_TOKEN.findall(content)
        if not tags:
            return []
        return [EMBEDDED_HTML_PREFIX + w for w in _html_warnings("".join(tags))]

    return []
