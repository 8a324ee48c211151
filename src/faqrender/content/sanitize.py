"""Allow-list HTML sanitization for FAQ answers."""

from __future__ import annotations

import logging
import re
from typing import Optional

import bleach
from bleach.css_sanitizer import CSSSanitizer

from faqrender.utils.text import escape_html

logger = logging.getLogger(__name__)

# No h1-h6: headings are stripped to their text
ALLOWED_TAGS = frozenset([
    "p", "br",
    "strong", "em", "u", "s", "b", "i",
    "a",
    "ul", "ol", "li",
    "code", "pre", "hr",
    "table", "caption", "thead", "tbody", "tfoot", "tr", "th", "td",
    "col", "colgroup",
    "img",
    "div", "span",
    "video", "source",
    "figure", "figcaption",
])

ALLOWED_ATTRIBUTES = frozenset([
    "href", "title", "target", "rel",
    "src", "alt", "width", "height",
    "class", "id", "style",
    # Tables
    "rowspan", "colspan", "scope", "headers",
    # Video
    "controls", "autoplay", "loop", "muted", "poster",
])

URI_ATTRIBUTES = frozenset(["href", "src", "poster"])

# Media sources are the only place an image data URI may appear
DATA_URI_TAGS = frozenset(["img", "video", "source"])
DATA_URI_ATTRIBUTES = frozenset(["src", "poster"])

# Known-safe schemes, or anything without a scheme (relative URLs, anchors).
ALLOWED_URI_PATTERN = re.compile(
    r"^(?:(?:(?:f|ht)tps?|mailto|tel|callto|sms|cid|xmpp):|[^a-z]|[a-z+.\-]+(?:[^a-z+.\-:]|$))",
    re.IGNORECASE,
)
IMAGE_DATA_URI_PATTERN = re.compile(r"^data:image/", re.IGNORECASE)

# "data" is narrowed to media image URIs by _allow_attribute
ALLOWED_PROTOCOLS = frozenset([
    "http", "https", "ftp", "ftps",
    "mailto", "tel", "callto", "sms", "cid", "xmpp",
    "data",
])

_RAW_TEXT_OPEN = re.compile(r"<(script|style)\b", re.IGNORECASE)
_RAW_TEXT_CLOSE = {
    "script": re.compile(r"</script\s*>", re.IGNORECASE),
    "style": re.compile(r"</style\s*>", re.IGNORECASE),
}
_URI_WHITESPACE = re.compile(r"[\x00-\x20\x7f-\xa0\u1680\u180e\u2000-\u2029\u205f\u3000]")

_CSS_SANITIZER = CSSSanitizer()


def is_allowed_uri(value: str, allow_image_data: bool = False) -> bool:
    """True when a URL uses an allowed scheme or no scheme.

    Image data URIs pass only with ``allow_image_data``.
    """
    candidate = _URI_WHITESPACE.sub("", value or "")
    if IMAGE_DATA_URI_PATTERN.match(candidate):
        return allow_image_data
    return bool(ALLOWED_URI_PATTERN.match(candidate))


def _allow_attribute(tag: str, name: str, value: str) -> bool:
    if name not in ALLOWED_ATTRIBUTES:
        return False
    if name in URI_ATTRIBUTES:
        media = tag in DATA_URI_TAGS and name in DATA_URI_ATTRIBUTES
        return is_allowed_uri(value, allow_image_data=media)
    return True


def drop_script_and_style(html: str) -> str:
    """Remove <script> and <style> blocks along with their contents.

    A block that is never closed swallows the rest of the input. The
    scan only moves forward, so its cost is linear in the input size.
    """
    parts = []
    pos = 0
    while True:
        opening = _RAW_TEXT_OPEN.search(html, pos)
        if opening is None:
            parts.append(html[pos:])
            break
        parts.append(html[pos:opening.start()])
        tag_end = html.find(">", opening.end())
        if tag_end == -1:
            break
        closing = _RAW_TEXT_CLOSE[opening.group(1).lower()].search(html, tag_end + 1)
        if closing is None:
            break
        pos = closing.end()
    return "".join(parts)


def sanitize_html(html: Optional[str], log: Optional[logging.Logger] = None) -> str:
    """Strip tags, attributes and URLs that are not on the allow-list.

    Disallowed markup is removed rather than escaped, so surrounding text
    survives. If bleach itself fails, the input comes back fully escaped.
    """
    if not html:
        return ""
    log = log or logger

    try:
        stripped = drop_script_and_style(html)
        return bleach.clean(
            stripped,
            tags=ALLOWED_TAGS,
            attributes=_allow_attribute,
            protocols=ALLOWED_PROTOCOLS,
            css_sanitizer=_CSS_SANITIZER,
            strip=True,
            strip_comments=True,
        )
    except Exception:
        log.error("Error sanitizing HTML", exc_info=True)
        return escape_html(html)
