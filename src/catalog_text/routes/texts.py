"""Text routes — render a Markdown page by slug."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from catalog_text.database.repositories.texts import TextRepository
from catalog_text.errors import CatalogTextError
from catalog_text.services import texts as texts_svc

router = APIRouter(tags=["texts"])

logger = logging.getLogger(__name__)


@router.get("/text/{slug}", response_class=HTMLResponse)
async def text_page(
    request: Request,
    slug: str,
    lang: Annotated[str | None, Query()] = None,
) -> Response:
    """Render the text page for a slug, optionally in a requested language."""
    cosmos = request.app.state.cosmos
    repo = TextRepository(cosmos.database)
    try:
        result = await texts_svc.get_text_html(slug, repo, lang)
    except CatalogTextError:
        logger.exception("Text retrieval failed — slug=%s lang=%s", slug, lang)
        return PlainTextResponse("Error retrieving text", status_code=500)
    if result is None:
        return PlainTextResponse("Not Found", status_code=404)

    text, html = result
    templates = request.app.state.templates
    return templates.TemplateResponse(
        "text.html",
        {"request": request, "title": text.slug, "content": html},
    )
