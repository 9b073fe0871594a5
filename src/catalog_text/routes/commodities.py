"""Commodity routes — catalog list and detail with rendered description."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Query, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from catalog_text.database.repositories.commodities import CommodityRepository
from catalog_text.database.repositories.texts import TextRepository
from catalog_text.errors import CatalogTextError
from catalog_text.services import commodities as commodities_svc

router = APIRouter(prefix="/commodities", tags=["commodities"])

logger = logging.getLogger(__name__)


@router.get("/", response_class=HTMLResponse)
async def list_commodities(request: Request) -> Response:
    """Render the commodity catalog."""
    cosmos = request.app.state.cosmos
    repo = CommodityRepository(cosmos.database)
    try:
        commodities = await commodities_svc.list_commodities(repo)
    except CatalogTextError:
        logger.exception("Commodity listing failed")
        return PlainTextResponse("Error retrieving commodities", status_code=500)

    templates = request.app.state.templates
    return templates.TemplateResponse(
        "commodities.html",
        {"request": request, "commodities": commodities},
    )


@router.get("/{name}", response_class=HTMLResponse)
async def commodity_detail(
    request: Request,
    name: str,
    lang: Annotated[str | None, Query()] = None,
) -> Response:
    """Render one commodity with its description."""
    cosmos = request.app.state.cosmos
    commodities_repo = CommodityRepository(cosmos.database)
    texts_repo = TextRepository(cosmos.database)
    try:
        result = await commodities_svc.describe_commodity(
            name, commodities_repo, texts_repo, lang
        )
    except CatalogTextError:
        logger.exception("Commodity retrieval failed — name=%s lang=%s", name, lang)
        return PlainTextResponse("Error retrieving commodity", status_code=500)
    if result is None:
        return PlainTextResponse("Not Found", status_code=404)

    commodity, description = result
    templates = request.app.state.templates
    return templates.TemplateResponse(
        "commodity.html",
        {"request": request, "commodity": commodity, "description": description},
    )
