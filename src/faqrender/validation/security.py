"""Security heuristics for user-authored HTML.

Each check scans forward only, so untrusted input is handled in linear
time even when it is full of half-written tags.
"""

from __future__ import annotations

import re
from typing import Callable, Optional

_SCRIPT_OPEN = re.compile(r"<script", re.IGNORECASE)
_SCRIPT_CLOSE = re.compile(r"</script>", re.IGNORECASE)
_WORD_BEFORE_EQUALS = re.compile(r"(?<!\w)(\w+)\s*=")
_ON = re.compile(r"on", re.IGNORECASE)
_JAVASCRIPT = re.compile(r"javascript:", re.IGNORECASE)
_NON_IMAGE_DATA = re.compile(r"data:(?!image)", re.IGNORECASE)


def _has_script_block(html: str) -> bool:
    # The first <script...> that is terminated gives the earliest point
    # a closing </script> can follow.
    opening = _SCRIPT_OPEN.search(html)
    if opening is None:
        return False
    tag_end = html.find(">", opening.end())
    return tag_end != -1 and _SCRIPT_CLOSE.search(html, tag_end + 1) is not None


def _has_event_handler(html: str) -> bool:
    # Matches "on" plus at least one word character somewhere inside a
    # word that is followed by "=".
    for match in _WORD_BEFORE_EQUALS.finditer(html):
        word = match.group(1)
        on = _ON.search(word)
        if on is not None and on.end() < len(word):
            return True
    return False


def _opening_tag(names: str) -> Callable[[str], bool]:
    opening = re.compile(r"<(?:%s)" % names, re.IGNORECASE)

    def check(html: str) -> bool:
        match = opening.search(html)
        return match is not None and html.find(">", match.end()) != -1

    return check


# (check, message) in reporting order; each adds at most one warning
SECURITY_CHECKS: list[tuple[Callable[[str], bool], str]] = [
    (_has_script_block, "Script tags are not allowed for security reasons"),
    (
        _has_event_handler,
        "Event handlers (onclick, onload, etc.) are not allowed for security reasons",
    ),
    (
        lambda html: _JAVASCRIPT.search(html) is not None,
        "JavaScript protocol in URLs is not allowed for security reasons",
    ),
    (
        lambda html: _NON_IMAGE_DATA.search(html) is not None,
        "Data URLs are only allowed for images",
    ),
    (_opening_tag("iframe"), "Iframe tags are not allowed"),
    (_opening_tag("object|embed"), "Object and embed tags are not allowed"),
]


def validate_html(html: Optional[str]) -> list[str]:
    """Return one message per risky construct category found in html."""
    if not html:
        return []
    return [message for check, message in SECURITY_CHECKS if check(html)]
