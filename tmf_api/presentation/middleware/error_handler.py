"""Error translation into the TMF error envelope.

Domain errors, framework errors (validation, routing) and anything else
that escapes a handler all leave the service as
``{code, reason, message?, status, referenceError?, "@type": "Error"}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import DBAPIError
from starlette.middleware.base import BaseHTTPMiddleware

from tmf_api.domain.exceptions import (
    BadRequestError,
    ConflictError,
    InternalServerError,
    NotFoundError,
    TMForumApiError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def error_envelope(exc: TMForumApiError) -> tuple[int, dict[str, Any]]:
    """Status code and body for a classified error."""
    body: dict[str, Any] = {"code": exc.code, "reason": exc.reason}
    if exc.message:
        body["message"] = exc.message
    body["status"] = str(exc.http_status)
    if exc.reference_error:
        body["referenceError"] = exc.reference_error
    body["@type"] = "Error"
    return exc.http_status, body


def _error_response(exc: TMForumApiError) -> JSONResponse:
    status_code, body = error_envelope(exc)
    return JSONResponse(status_code=status_code, content=body)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request"


def classify_validation_error(exc: RequestValidationError) -> TMForumApiError:
    """Malformed JSON is a bad request; schema violations are validation errors."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        return BadRequestError("Malformed JSON body")
    return ValidationError(_describe_validation_errors(exc))


def classify_http_exception(exc: StarletteHTTPException) -> TMForumApiError:
    detail = exc.detail if isinstance(exc.detail, str) else None
    if exc.status_code == 404:
        return NotFoundError(message=detail or "Resource not found")
    if exc.status_code == 409:
        return ConflictError(detail)
    if 400 <= exc.status_code < 500:
        return BadRequestError(detail)
    return InternalServerError(detail)


def install_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(TMForumApiError)
    async def _tmf_error_handler(_request: Request, exc: TMForumApiError):
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(_request: Request, exc: RequestValidationError):
        return _error_response(classify_validation_error(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_error_handler(_request: Request, exc: StarletteHTTPException):
        return _error_response(classify_http_exception(exc))


def summarize_exception(exc: Exception) -> str | None:
    """One-line message for an unexpected error.

    Database errors report only the driver's message, never the SQL
    statement and its bound parameters.
    """
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        exc = exc.orig
    lines = str(exc).strip().splitlines()
    return lines[0] if lines else None


class ErrorBoundaryMiddleware(BaseHTTPMiddleware):
    """Last line of defence: any unhandled exception becomes an Internal envelope."""

    async def dispatch(self, request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            return _error_response(InternalServerError(summarize_exception(exc)))
