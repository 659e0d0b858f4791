"""Unit tests for the error translator and the error boundary."""

import pytest
import pytest_asyncio
from fastapi import FastAPI, HTTPException
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError

from tmf_api.domain.exceptions import (
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    ValidationError,
)
from tmf_api.presentation.middleware.error_handler import (
    ErrorBoundaryMiddleware,
    error_envelope,
    install_exception_handlers,
    summarize_exception,
)


@pytest.mark.parametrize(
    ("exc", "status", "code", "reason"),
    [
        (NotFoundError("Catalog", "42"), 404, "60", "Not Found"),
        (BadRequestError("bad"), 400, "20", "Bad Request"),
        (ValidationError("invalid"), 400, "21", "Validation Error"),
        (ConflictError("clash"), 409, "62", "Conflict"),
        (InternalServerError(), 500, "1", "Internal Server Error"),
    ],
)
def test_error_envelope_taxonomy(exc, status, code, reason):
    status_code, body = error_envelope(exc)

    assert status_code == status
    assert body["code"] == code
    assert body["reason"] == reason
    assert body["status"] == str(status)
    assert body["@type"] == "Error"


def test_error_envelope_message_and_reference():
    _, body = error_envelope(BadRequestError("oops", reference_error="https://docs/err"))
    assert body == {
        "code": "20",
        "reason": "Bad Request",
        "message": "oops",
        "status": "400",
        "referenceError": "https://docs/err",
        "@type": "Error",
    }


def test_not_found_message_names_entity():
    _, body = error_envelope(NotFoundError("Catalog", "42"))
    assert body["message"] == "Catalog with id 42 not found"
    assert "referenceError" not in body


def _integrity_error() -> IntegrityError:
    return IntegrityError(
        "INSERT INTO widgets (id, secret) VALUES (?, ?)",
        ("w-1", "hunter2"),
        Exception("NOT NULL constraint failed: widgets.name"),
    )


class Widget(BaseModel):
    name: str
    size: int


def _make_app() -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app)
    app.add_middleware(ErrorBoundaryMiddleware)

    @app.get("/missing")
    async def missing() -> dict:
        raise NotFoundError("Widget", "7")

    @app.get("/boom")
    async def boom() -> dict:
        raise RuntimeError("database on fire")

    @app.get("/constraint")
    async def constraint() -> dict:
        raise _integrity_error()

    @app.get("/conflict")
    async def conflict() -> dict:
        raise HTTPException(status_code=409, detail="already there")

    @app.get("/teapot")
    async def teapot() -> dict:
        raise HTTPException(status_code=418, detail="short and stout")

    @app.post("/widgets")
    async def create_widget(widget: Widget) -> dict:
        return widget.model_dump()

    return app


@pytest_asyncio.fixture
async def client():
    transport = ASGITransport(app=_make_app())
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.asyncio
async def test_domain_not_found(client: AsyncClient):
    response = await client.get("/missing")
    assert response.status_code == 404
    assert response.json()["code"] == "60"
    assert response.json()["message"] == "Widget with id 7 not found"


@pytest.mark.asyncio
async def test_unknown_exception_becomes_internal(client: AsyncClient):
    response = await client.get("/boom")
    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "1"
    assert body["message"] == "database on fire"
    assert body["@type"] == "Error"


@pytest.mark.asyncio
async def test_unknown_route_is_not_found(client: AsyncClient):
    response = await client.get("/nowhere")
    assert response.status_code == 404
    assert response.json()["code"] == "60"


@pytest.mark.asyncio
async def test_http_conflict_maps_to_conflict(client: AsyncClient):
    response = await client.get("/conflict")
    assert response.status_code == 409
    assert response.json()["code"] == "62"
    assert response.json()["message"] == "already there"


@pytest.mark.asyncio
async def test_other_client_errors_map_to_bad_request(client: AsyncClient):
    response = await client.get("/teapot")
    assert response.status_code == 400
    assert response.json()["code"] == "20"


@pytest.mark.asyncio
async def test_wrong_method_maps_to_bad_request(client: AsyncClient):
    response = await client.delete("/widgets")
    assert response.status_code == 400
    assert response.json()["code"] == "20"


@pytest.mark.asyncio
async def test_malformed_json_is_bad_request(client: AsyncClient):
    response = await client.post(
        "/widgets", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "20"


@pytest.mark.asyncio
async def test_schema_violation_is_validation_error(client: AsyncClient):
    response = await client.post("/widgets", json={"size": "large"})
    assert response.status_code == 400
    body = response.json()
    assert body["code"] == "21"
    assert "name" in body["message"]
    assert "size" in body["message"]


@pytest.mark.asyncio
async def test_database_error_message_omits_statement(client: AsyncClient):
    response = await client.get("/constraint")

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == "1"
    assert body["message"] == "NOT NULL constraint failed: widgets.name"
    assert "INSERT" not in response.text
    assert "hunter2" not in response.text


@pytest.mark.parametrize(
    ("exc", "message"),
    [
        (RuntimeError("first line\nsecond line"), "first line"),
        (RuntimeError(""), None),
        (_integrity_error(), "NOT NULL constraint failed: widgets.name"),
    ],
)
def test_summarize_exception(exc, message):
    assert summarize_exception(exc) == message
