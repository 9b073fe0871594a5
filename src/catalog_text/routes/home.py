"""Home route — static greeting."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["home"])


@router.get("/", response_class=PlainTextResponse)
async def home() -> PlainTextResponse:
    """Return the greeting body."""
    return PlainTextResponse("Hello remote world!\n")
