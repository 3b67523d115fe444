"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (catalog, health)
- Error handlers (centralized responder chain)
- CORS, security headers and rate limiting middleware
- Logging configuration
- The JSON book store shared by every request

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.routing import APIRoute
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from bookstore.core.config import Settings, settings as default_settings
from bookstore.infrastructure.catalog.json_book_store import JsonBookStore
from bookstore.interfaces.catalog.router import router as books_router
from bookstore.interfaces.health import router as health_router
from bookstore.shared.errors.handlers import register_error_handlers
from bookstore.shared.logging import configure_logging
from bookstore.shared.security.headers import SecurityHeadersMiddleware
from bookstore.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def list_endpoints(app: FastAPI) -> list[str]:
    """Return "METHOD path" for every API route, sorted by path."""
    endpoints = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            for method in sorted(route.methods):
                endpoints.append(f"{method} {route.path}")
    return sorted(endpoints, key=lambda e: (e.split(" ", 1)[1], e))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: report the catalog file and the routes served."""
    logger.info("Catalog document: %s", app.state.book_store.path)
    for endpoint in list_endpoints(app):
        logger.info("Endpoint: %s", endpoint)
    yield


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        A fully configured FastAPI application instance.
    """
    cfg = app_settings or default_settings
    configure_logging(level=cfg.log_level)

    app = FastAPI(
        title=cfg.project_name,
        version=cfg.version,
        docs_url="/docs" if cfg.debug else None,
        redoc_url="/redoc" if cfg.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.book_store = JsonBookStore(cfg.books_path)

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(cfg.rate_limit_default)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location"],
    )

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(books_router)

    return app


app = create_app()
