"""Unit tests for offset/limit parsing and the pagination middleware."""

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from tmf_api.domain.entities import PaginationParams
from tmf_api.presentation.middleware.pagination import (
    PaginationMiddleware,
    parse_pagination,
)


@pytest.mark.parametrize(
    ("offset_raw", "limit_raw", "expected"),
    [
        (None, None, PaginationParams(offset=0, limit=20)),
        ("5", "10", PaginationParams(offset=5, limit=10)),
        ("-3", "10", PaginationParams(offset=0, limit=10)),
        ("abc", "10", PaginationParams(offset=0, limit=10)),
        ("2", "0", PaginationParams(offset=2, limit=20)),
        ("2", "-1", PaginationParams(offset=2, limit=20)),
        ("2", "many", PaginationParams(offset=2, limit=20)),
        ("0", "500", PaginationParams(offset=0, limit=100)),
    ],
)
def test_parse_pagination(offset_raw, limit_raw, expected):
    assert parse_pagination(offset_raw, limit_raw) == expected


def test_parse_pagination_custom_bounds():
    params = parse_pagination(None, "50", default_limit=5, max_limit=25)
    assert params == PaginationParams(offset=0, limit=25)
    assert parse_pagination(None, None, default_limit=5, max_limit=25).limit == 5


def _make_app(**kwargs) -> FastAPI:
    app = FastAPI()
    app.add_middleware(PaginationMiddleware, **kwargs)

    @app.get("/items")
    async def items(request: Request) -> dict:
        pagination = request.state.pagination
        return {"offset": pagination.offset, "limit": pagination.limit}

    return app


@pytest.mark.asyncio
async def test_middleware_attaches_pagination_to_request_state():
    transport = ASGITransport(app=_make_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/items", params={"offset": "4", "limit": "1000"})

    assert response.status_code == 200
    assert response.json() == {"offset": 4, "limit": 100}


@pytest.mark.asyncio
async def test_middleware_honours_custom_parameter_names():
    app = _make_app(offset_param="start", limit_param="count")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/items", params={"start": "7", "count": "3"})

    assert response.json() == {"offset": 7, "limit": 3}
