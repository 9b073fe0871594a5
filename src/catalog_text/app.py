"""Web entry point — FastAPI application factory and lifespan wiring."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import uvicorn
from fastapi import FastAPI, Request
from fastapi.templating import Jinja2Templates

from catalog_text.config import load_settings
from catalog_text.database.client import init_database
from catalog_text.health import check_emulators
from catalog_text.logging import configure_logging
from catalog_text.routes import commodities, home, texts

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Awaitable, Callable

    from starlette.responses import Response

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect to Cosmos DB for the lifetime of the app."""
    settings = app.state.settings
    if settings.app.is_development and not await check_emulators(settings):
        msg = "Cosmos DB is not reachable"
        raise RuntimeError(msg)

    app.state.cosmos = await init_database(settings.cosmos)
    logger.info("Web app started — env=%s", settings.app.env)
    try:
        yield
    finally:
        await app.state.cosmos.close()
        logger.info("Web app shutdown complete")


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = load_settings()
    configure_logging(settings.app.log_level, log_file=settings.app.log_file or None)

    app = FastAPI(title="catalog-text", lifespan=lifespan)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    slow_request_ms = settings.app.slow_request_ms

    @app.middleware("http")
    async def log_slow_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        started_at = time.monotonic()
        response = await call_next(request)
        duration_ms = (time.monotonic() - started_at) * 1000
        if duration_ms >= slow_request_ms:
            logger.warning(
                "Slow request — method=%s path=%s status=%d duration_ms=%.0f",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
            )
        return response

    app.include_router(home.router)
    app.include_router(texts.router)
    app.include_router(commodities.router)
    return app


def main() -> None:
    """Entry point for the web process."""
    settings = load_settings()
    uvicorn.run(
        "catalog_text.app:create_app",
        factory=True,
        host=settings.app.host,
        port=settings.app.port,
    )


if __name__ == "__main__":
    main()
