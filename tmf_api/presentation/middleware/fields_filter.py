"""Sparse field selection (``?fields=id,name``) applied to JSON responses."""

import json
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from starlette.middleware.base import BaseHTTPMiddleware


def parse_fields(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [name.strip() for name in raw.split(",") if name.strip()]


def filter_fields(payload: Any, fields: list[str]) -> Any:
    """Keep only the requested top-level keys of an object or of each array element."""
    if isinstance(payload, dict):
        return {key: value for key, value in payload.items() if key in fields}
    if isinstance(payload, list):
        return [filter_fields(item, fields) for item in payload]
    return payload


class FieldsFilterMiddleware(BaseHTTPMiddleware):
    """Projects successful JSON bodies onto the requested field list.

    Non-2xx responses, non-JSON responses and requests without a field list
    pass through untouched. Projection is shallow.
    """

    def __init__(self, app, fields_param: str = "fields"):
        super().__init__(app)
        self._fields_param = fields_param

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        fields = parse_fields(request.query_params.get(self._fields_param))
        if not fields or not 200 <= response.status_code < 300:
            return response
        if not response.headers.get("content-type", "").startswith("application/json"):
            return response

        body = b"".join([chunk async for chunk in response.body_iterator])
        try:
            payload = json.loads(body)
        except ValueError:
            return Response(
                content=body,
                status_code=response.status_code,
                headers=dict(response.headers),
            )

        headers = {
            key: value
            for key, value in response.headers.items()
            if key.lower() != "content-length"
        }
        return JSONResponse(
            content=filter_fields(payload, fields),
            status_code=response.status_code,
            headers=headers,
        )
