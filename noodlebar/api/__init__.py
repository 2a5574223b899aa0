"""noodlebar REST API — FastAPI application factory."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from noodlebar.api.deps import build_services
from noodlebar.api.errors import register_error_handlers
from noodlebar.api.middleware.request_id import RequestIDMiddleware
from noodlebar.api.routers import auth, orders, users
from noodlebar.core.config import Settings
from noodlebar.core.database import Database
from noodlebar.core.logging import setup_logging

log = structlog.get_logger(__name__)


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: open the database (and create tables). Shutdown: dispose the engine."""
    settings: Settings = app.state.settings
    db: Database = app.state.db
    db.open()
    if settings.create_tables:
        await db.create_all()
    log.info("database opened", create_tables=settings.create_tables)
    try:
        yield
    finally:
        await db.close()
        log.info("database closed")


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build and return the FastAPI application.

    *settings* defaults to :meth:`Settings.from_env`; *database* defaults to
    a :class:`Database` on ``settings.database_url``.
    """
    settings = settings or Settings.from_env()
    setup_logging(settings)

    app = FastAPI(
        title="noodlebar",
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=_lifespan,
    )
    app.state.settings = settings
    app.state.db = database or Database(settings.database_url)
    app.state.services = build_services(settings)

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    @app.get("/", response_class=PlainTextResponse, tags=["ops"])
    async def root() -> str:
        return "Welcome to the Dashboard"

    @app.get("/health", tags=["ops"])
    async def health() -> JSONResponse:
        return JSONResponse({"status": "ok"})

    app.include_router(orders.router, tags=["orders"])
    app.include_router(auth.router, tags=["auth"])
    app.include_router(users.router, tags=["users"])

    return app
