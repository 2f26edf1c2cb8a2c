"""Lessons API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - orders router registered before collections so POST /collections/orders wins
    - Global error handlers map LessonsApiError → structured JSON responses
    - Document store connected on startup and closed on shutdown via lifespan
    - Static files mounted last, only when the directory exists
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from lessons_api.api.error_handlers import register_error_handlers
from lessons_api.api.request_logging import RequestLoggingMiddleware
from lessons_api.api.responses import IndentedJSONResponse
from lessons_api.api.routes import collections, health, orders, root, search
from lessons_api.config import get_settings
from lessons_api.infrastructure.database import close_store, init_store
from lessons_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    ready = await init_store(
        settings.resolved_mongo_uri(),
        settings.mongo_db_name,
        timeout_ms=settings.mongo_timeout_ms,
    )
    if not ready:
        logger.error("Document store unavailable; store-backed routes will answer 503")
    logger.info("Lessons API started")
    yield
    await close_store()
    logger.info("Lessons API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title="Lessons API", version="1.0.0", lifespan=lifespan,
        default_response_class=IndentedJSONResponse,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(search.router)
    app.include_router(orders.router)
    app.include_router(collections.router)

    if os.path.isdir(settings.static_dir):
        app.mount("/", StaticFiles(directory=settings.static_dir), name="static")

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
