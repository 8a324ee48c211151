"""Structural checks for hand-written HTML.

This is a token scanner, not a parser: it looks at tag tokens in document
order and keeps an explicit stack of open elements. It flags

* attribute values whose opening quote is never closed inside the tag,
* a tag left without its closing ``>`` at the end of the input,
* closing tags with nothing open, closing tags that do not match the
  innermost open element, and elements never closed,
* attribute assignments followed by something other than a quote or a
  bare word.

Nesting depth is unbounded and the input is untrusted, so nothing here
recurses.
"""

from __future__ import annotations

import re
from typing import Optional

from faqrender.core.models import TagStackEntry
from faqrender.utils.text import excerpt

VOID_TAGS = frozenset([
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
])

# A complete tag, or a tag still open when the input runs out
_TAG_TOKEN = re.compile(r"<[^>]+>|<[a-zA-Z/][^<>]*$")
_UNCLOSED_SINGLE = re.compile(r"\w+\s*=\s*'[^']*$")
_UNCLOSED_DOUBLE = re.compile(r'\w+\s*=\s*"[^"]*$')
_ELEMENT_TAG = re.compile(r"</?([a-zA-Z][a-zA-Z0-9]*)[^>]*>")
_MALFORMED_ATTR = re.compile(r"""<[^>]+\s+(\w+)\s*=\s*(?!["'\w])[^>]*>""")


def _check_tokens(html: str) -> list[str]:
    errors: list[str] = []
    for match in _TAG_TOKEN.finditer(html):
        tag = match.group(0)
        if _UNCLOSED_SINGLE.search(tag) or _UNCLOSED_DOUBLE.search(tag):
            errors.append(f"Unclosed attribute quote in tag: {excerpt(tag)}")
        if tag.startswith("<") and not tag.endswith(">"):
            errors.append(f"Unclosed tag bracket: {excerpt(tag)}")
    return errors


def _check_balance(html: str) -> list[str]:
    errors: list[str] = []
    stack: list[TagStackEntry] = []

    for match in _ELEMENT_TAG.finditer(html):
        full_tag = match.group(0)
        tag_name = match.group(1).lower()

        if full_tag.startswith("</"):
            if not stack:
                errors.append(f"Orphaned closing tag: </{tag_name}>")
            elif stack[-1].tag_name == tag_name:
                stack.pop()
            else:
                errors.append(
                    f"Mismatched tags: Expected closing tag for <{stack[-1].tag_name}>, "
                    f"found </{tag_name}>"
                )
                # Drop the matching open tag so one typo doesn't cascade
                for i, entry in enumerate(stack):
                    if entry.tag_name == tag_name:
                        del stack[i]
                        break
        elif not (full_tag.endswith("/>") or tag_name in VOID_TAGS):
            stack.append(TagStackEntry(tag_name=tag_name, position=match.start()))

    for entry in stack:
        errors.append(f"Unclosed tag: <{entry.tag_name}> is missing closing tag </{entry.tag_name}>")
    return errors


def _check_attributes(html: str) -> list[str]:
    return [
        f"Malformed attribute syntax: {excerpt(m.group(0))}"
        for m in _MALFORMED_ATTR.finditer(html)
    ]


def validate_html_syntax(html: Optional[str]) -> list[str]:
    """Return structural warnings for html, in scan order."""
    if not html:
        return []
    return _check_tokens(html) + _check_balance(html) + _check_attributes(html)
