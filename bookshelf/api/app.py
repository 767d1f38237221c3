# This file builds the FastAPI application and registers the books router.
# Middleware, error handlers and the database lifecycle are configured here in one place.
# The database client is created when the app starts and its pool is disposed when it stops.
# A database URL that cannot produce an engine fails startup, which stops the server process.

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from bookshelf.api.api_config import ApiConfig
from bookshelf.api.cors import apply_cross_origin_headers
from bookshelf.api.dependencies import get_config, get_database_client, reset_dependencies
from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.api.routers.books import router as books_router
from bookshelf.common.logging import configure_logging

LOGGER = logging.getLogger("bookshelf.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    db = get_database_client()
    if db.can_connect():
        LOGGER.info("Database reachable at startup")
    else:
        LOGGER.warning("Database not reachable at startup; requests will fail until it is")
    try:
        yield
    finally:
        db.dispose()
        reset_dependencies()
        LOGGER.info("Database pool disposed")


def create_app(config: ApiConfig | None = None) -> FastAPI:
    """Create configured FastAPI application instance."""

    config = config or get_config()
    configure_logging(config.log_level)

    app = FastAPI(
        title=config.api_name,
        description="Create, read and delete book records over HTTP with JSON payloads.",
        version=config.app_version,
        lifespan=lifespan,
        openapi_tags=[{"name": "books", "description": "Book collection and single-book operations."}],
    )
    app.state.config = config

    @app.middleware("http")
    async def cross_origin_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
        response: Response = await call_next(request)
        return apply_cross_origin_headers(response, config)

    register_error_handlers(app)

    app.include_router(books_router, prefix=config.api_base_path)

    return app


app = create_app()
