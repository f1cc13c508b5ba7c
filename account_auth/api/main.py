"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures logging, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from psycopg_pool import ConnectionPool

from account_auth import __version__
from account_auth.adapters.repository import (
    InMemoryCredentialStore,
    PostgresCredentialStore,
    run_migrations,
)
from account_auth.api.auth import router as auth_router
from account_auth.api.dependencies import build_rate_limiter
from account_auth.api.errors import register_exception_handlers
from account_auth.config.settings import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Account registration and login",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates the credential store (and its connection pool) on startup
    - Runs migrations on startup
    - Creates the app-wide login rate limiter
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    pool = None

    logger.info("Starting application...")

    if settings.credential_store_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.credential_store = PostgresCredentialStore(pool)
    else:
        logger.warning("Using in-memory credential store; accounts are lost on restart")
        app.state.credential_store = InMemoryCredentialStore()

    app.state.rate_limiter = build_rate_limiter(settings)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="account-auth",
    description="Account registration and login API - validated sign-up, bcrypt credentials, JWT sessions",
    version=__version__,
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(auth_router, prefix=get_settings().api_prefix)


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Liveness text."""
    return "API is running..."


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with credential store validation.

    Returns 200 OK if application and store are healthy.
    Raises exception if the store is unreachable.
    """
    request.app.state.credential_store.ping()
    return {"status": "healthy"}
