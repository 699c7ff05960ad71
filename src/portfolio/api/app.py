from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from portfolio.api.lifespan import lifespan
from portfolio.api.routes.books import router as books_router
from portfolio.api.routes.health import router as health_router
from portfolio.api.routes.posts import router as posts_router
from portfolio.api.routes.projects import router as projects_router
from portfolio.api.routes.root import router as root_router
from portfolio.core.errors import ContentError

logger = logging.getLogger(__name__)


async def content_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Report unloadable content as a temporary outage instead of a server error."""
    logger.error("Content unavailable: %s", exc)
    return JSONResponse(status_code=503, content={"detail": f"Content unavailable: {exc}"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Portfolio API",
        description="Read-only access to showcased projects, the reading list, and blog posts.",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ContentError, content_error_handler)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(projects_router)
    app.include_router(books_router)
    app.include_router(posts_router)

    return app
