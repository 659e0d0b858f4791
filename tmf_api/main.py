"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tmf_api.config import Settings, get_settings
from tmf_api.infrastructure.database.session import (
    build_engine,
    build_session_factory,
    init_models,
)
from tmf_api.infrastructure.logging.log_config import setup_logging
from tmf_api.infrastructure.webhooks import HttpxWebhookClient
from tmf_api.presentation.api.router import build_api_router
from tmf_api.presentation.middleware.error_handler import (
    ErrorBoundaryMiddleware,
    install_exception_handlers,
)
from tmf_api.presentation.middleware.fields_filter import FieldsFilterMiddleware
from tmf_api.presentation.middleware.pagination import PaginationMiddleware
from tmf_api.presentation.middleware.request_id import RequestIdMiddleware

logger = logging.getLogger(__name__)


async def _ensure_database_exists(database_url: str) -> None:
    """Issue ``CREATE DATABASE`` on the server when the target is missing.

    Runs against the ``postgres`` maintenance database; failures only warn.
    """
    import asyncpg
    from sqlalchemy.engine import make_url

    url = make_url(database_url)
    if not url.database:
        return
    maintenance_dsn = url.set(drivername="postgresql", database="postgres").render_as_string(
        hide_password=False
    )

    try:
        conn = await asyncpg.connect(maintenance_dsn)
    except Exception as exc:
        logger.warning("Cannot reach PostgreSQL to check '%s': %s", url.database, exc)
        return

    try:
        found = await conn.fetchval(
            "SELECT 1 FROM pg_database WHERE datname = $1", url.database
        )
        if found:
            return
        # Must run outside a transaction block
        await conn.execute(f'CREATE DATABASE "{url.database}"')
        logger.info("Created database '%s'", url.database)
    except Exception as exc:
        logger.warning("Could not create database '%s': %s", url.database, exc)
    finally:
        await conn.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, release the pool."""
    settings: Settings = app.state.settings
    setup_logging(settings)

    if settings.database_url.startswith("postgresql"):
        await _ensure_database_exists(settings.database_url)

    if settings.create_tables:
        await init_models(app.state.engine)
        logger.info("Database tables ensured")

    logger.info(
        "Serving %s at %s", ", ".join(settings.enabled_apis) or "no APIs",
        settings.public_base_url,
    )

    yield

    # Shutdown
    await app.state.engine.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = build_engine(
        settings.database_url, echo=(settings.app_env == "development"),
    )
    app.state.session_factory = build_session_factory(app.state.engine)
    app.state.webhook_client = HttpxWebhookClient(timeout=settings.hub_delivery_timeout)

    install_exception_handlers(app)

    # Middleware — last added runs first
    app.add_middleware(ErrorBoundaryMiddleware)
    app.add_middleware(FieldsFilterMiddleware, fields_param=settings.fields_param)
    app.add_middleware(
        PaginationMiddleware,
        offset_param=settings.offset_param,
        limit_param=settings.limit_param,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
    app.add_middleware(RequestIdMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Total-Count", "X-Result-Count", settings.request_id_header],
    )

    # Mount API routes
    app.include_router(build_api_router(settings.enabled_apis))

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    uvicorn.run(
        "tmf_api.main:app",
        host=_settings.host,
        port=_settings.port,
        reload=_settings.app_env == "development",
    )
