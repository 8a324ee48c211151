"""FastAPI preview service for FAQ content."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from faqrender.content.processor import (
    check_sanitization,
    format_label,
    process_content,
    render_items,
)
from faqrender.core.config import load_config
from faqrender.core.models import FAQItem, RenderedItem
from faqrender.utils.log import configure_logging
from faqrender.validation.warnings import get_content_warnings

logger = logging.getLogger(__name__)


class RenderRequest(BaseModel):
    content: str = ""
    # Free-form so unknown formats reach the renderer's HTML fallback
    format: str = "html"


class RenderResponse(BaseModel):
    html: str
    warnings: list[str]
    modified: bool
    label: str


class ItemsRequest(BaseModel):
    items: list[FAQItem] = Field(default_factory=list)


def create_app() -> FastAPI:
    config = load_config()
    configure_logging(config.debug)

    app = FastAPI(title="FAQ Render", docs_url=None, redoc_url=None)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled server error")
        return JSONResponse({"detail": "Internal server error"}, status_code=500)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.post("/api/render", response_model=RenderResponse)
    def render(body: RenderRequest) -> RenderResponse:
        return RenderResponse(
            html=process_content(body.content, body.format),
            warnings=get_content_warnings(body.content, body.format),
            modified=check_sanitization(body.content, body.format).modified,
            label=format_label(body.format),
        )

    @app.post("/api/items", response_model=list[RenderedItem])
    def items(body: ItemsRequest) -> list[RenderedItem]:
        return render_items(body.items)

    return app
