"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health + versioned API)
- Error handlers (centralized domain-to-HTTP mapping)
- Middleware (request logging, security headers, rate limiting)
- Logging configuration
- Database engine (connection pool) lifecycle

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from slowapi.errors import RateLimitExceeded
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from product_service.api.v1.router import router as api_v1_router
from product_service.core.config import Settings, settings as default_settings
from product_service.infrastructure.database import build_engine, verify_connection
from product_service.interfaces.health import router as health_router
from product_service.shared.errors.handlers import (
    UnhandledErrorMiddleware,
    register_error_handlers,
)
from product_service.shared.logging import configure_logging
from product_service.shared.request_logging import RequestLoggingMiddleware
from product_service.shared.security.headers import SecurityHeadersMiddleware
from product_service.shared.security.rate_limiting import (
    build_limiter,
    enforce_rate_limit,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open the connection pool, dispose it on shutdown.

    An engine injected through ``create_app`` is used as-is and left
    for the caller to dispose. Failing to reach the database aborts
    startup.
    """
    owns_engine = app.state.engine is None
    if owns_engine:
        engine = build_engine(app.state.settings)
        try:
            verify_connection(engine)
        except SQLAlchemyError:
            logger.critical("Failed to connect to database, aborting startup")
            engine.dispose()
            raise
        app.state.engine = engine

    logger.info("%s started (env=%s)", app.title, app.state.settings.app_env)

    yield

    logger.info("Shutting down %s", app.title)
    if owns_engine:
        app.state.engine.dispose()
        app.state.engine = None


def create_app(
    settings: Optional[Settings] = None, engine: Optional[Engine] = None
) -> FastAPI:
    """Create and configure the FastAPI application.

    This is the composition root of the application.

    Args:
        settings: Configuration to use. Defaults to the process-wide
            settings loaded from the environment.
        engine: Pre-built SQLAlchemy engine. When omitted the engine is
            built from ``settings`` during startup.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
        dependencies=[Depends(enforce_rate_limit)],
    )
    app.state.settings = settings
    app.state.engine = engine

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Unexpected errors (innermost) ---
    app.add_middleware(UnhandledErrorMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Request Logging (outermost) ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router)
    app.include_router(api_v1_router)

    return app


app = create_app()
