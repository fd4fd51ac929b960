"""Parity API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure → RFC 7807 problem responses
    - API docs exposed only in the development environment
    - HTTPS redirection only when settings.https_redirect is set
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app(settings) over a DI container: plain parameter passing,
      tests build apps with their own Settings
    - Module-level `app` kept for `uvicorn parity_api.main:app`
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from parity_api.api.error_handlers import register_error_handlers
from parity_api.api.routes import health, minimal_dus
from parity_api.config import Settings, get_settings
from parity_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application from settings (defaults to the cached environment)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"{settings.service_name} started ({settings.environment})",
        )
        yield
        logger.info(f"{settings.service_name} shutting down")

    docs_enabled = settings.is_development
    app = FastAPI(
        title="Parity API",
        version=settings.version,
        lifespan=lifespan,
        openapi_url="/openapi.json" if docs_enabled else None,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    if settings.https_redirect:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(minimal_dus.router)

    register_error_handlers(app)
    return app


app = create_app()
