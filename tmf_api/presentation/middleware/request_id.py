"""Request correlation id — reused from the caller or generated."""

from uuid import uuid4

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from tmf_api.application.request_context import request_id_var

REQUEST_ID_HEADER = "X-Request-Id"


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Tags every request and response with a correlation id.

    The id is exposed on ``request.state.request_id`` and on the
    ``request_id_var`` context variable read by logging and event publishing.
    """

    def __init__(self, app, header_name: str = REQUEST_ID_HEADER):
        super().__init__(app)
        self._header_name = header_name

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self._header_name) or str(uuid4())
        request.state.request_id = request_id

        token = request_id_var.set(request_id)
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[self._header_name] = request_id
        return response
