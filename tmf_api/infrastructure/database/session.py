"""SQLAlchemy database session and engine configuration."""

from collections.abc import AsyncGenerator, Awaitable, Callable

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tmf_api.infrastructure.database.base import Base


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def build_engine(database_url: str, *, echo: bool = False) -> AsyncEngine:
    """Create the async engine; SQLite connections get cascading foreign keys."""
    async_url = _get_async_url(database_url)
    engine = create_async_engine(async_url, echo=echo, future=True)
    if async_url.startswith("sqlite"):
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create every table that does not exist yet."""
    # Registers the tables on Base.metadata
    from tmf_api.infrastructure.database import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


_AFTER_COMMIT = "after_commit"


def after_commit(session: AsyncSession, callback: Callable[[], Awaitable[None]]) -> None:
    """Run ``callback`` once the request's transaction has committed.

    Callbacks are dropped when the request fails and the session rolls back.
    """
    session.info.setdefault(_AFTER_COMMIT, []).append(callback)


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency — yields an async DB session per request.

    Commits when the request succeeds, then runs the ``after_commit``
    callbacks in registration order.
    """
    session_factory: async_sessionmaker[AsyncSession] = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            session.info.pop(_AFTER_COMMIT, None)
            await session.rollback()
            raise

        for callback in session.info.pop(_AFTER_COMMIT, []):
            await callback()
