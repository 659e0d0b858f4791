"""Shared fixtures: a fresh app on a throwaway SQLite file per test."""

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from tmf_api.config import Settings
from tmf_api.infrastructure.database.session import init_models
from tmf_api.main import create_app

BASE_URL = "http://testserver"


@pytest_asyncio.fixture
async def app(tmp_path):
    settings = Settings(
        app_env="test",
        base_url=BASE_URL,
        database_url=f"sqlite:///{tmp_path / 'tmf.db'}",
    )
    application = create_app(settings)
    # ASGITransport does not run the lifespan
    await init_models(application.state.engine)
    yield application
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url=BASE_URL) as c:
        yield c
