"""Pydantic models for the FAQ content renderer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field


class ContentFormat(str, Enum):
    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


FormatLike = Union[ContentFormat, str, None]


def coerce_format(value: FormatLike) -> Optional[ContentFormat]:
    """Return the matching ContentFormat, or None when the value is not one."""
    if isinstance(value, ContentFormat):
        return value
    try:
        return ContentFormat(value)
    except (TypeError, ValueError):
        return None


FORMAT_LABELS: dict[ContentFormat, str] = {
    ContentFormat.HTML: "HTML",
    ContentFormat.MARKDOWN: "MD",
    ContentFormat.TEXT: "TXT",
}


# --- Syntax scan ---

@dataclass(frozen=True)
class TagStackEntry:
    tag_name: str
    position: int


# --- FAQ items ---

class FAQItem(BaseModel):
    summary: str = ""
    content: Optional[str] = None
    format: str = ContentFormat.HTML.value


class SanitizationCheck(BaseModel):
    modified: bool = False
    original_html: str = ""
    sanitized_html: str = ""


class RenderedItem(BaseModel):
    summary: str = ""
    format: str = ContentFormat.HTML.value
    label: str = "HTML"
    html: str = ""
    warnings: list[str] = Field(default_factory=list)
    modified: bool = False


# --- App config ---

class ServerConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class AppConfig(BaseModel):
    debug: bool = False
    default_format: ContentFormat = ContentFormat.HTML
    server: ServerConfig = Field(default_factory=ServerConfig)
