"""Offset/limit parsing for list endpoints."""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from tmf_api.domain.entities import DEFAULT_LIMIT, MAX_LIMIT, PaginationParams


def _parse_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    try:
        return int(raw.strip())
    except ValueError:
        return None


def parse_pagination(
    offset_raw: str | None,
    limit_raw: str | None,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
) -> PaginationParams:
    """Lenient parse: bad offsets become 0, bad limits the default, big limits the max."""
    offset = _parse_int(offset_raw)
    if offset is None or offset < 0:
        offset = 0

    limit = _parse_int(limit_raw)
    if limit is None or limit <= 0:
        limit = default_limit

    return PaginationParams(offset=offset, limit=min(limit, max_limit))


class PaginationMiddleware(BaseHTTPMiddleware):
    """Attaches ``request.state.pagination`` for every request. Never rejects."""

    def __init__(
        self,
        app,
        offset_param: str = "offset",
        limit_param: str = "limit",
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ):
        super().__init__(app)
        self._offset_param = offset_param
        self._limit_param = limit_param
        self._default_limit = default_limit
        self._max_limit = max_limit

    async def dispatch(self, request: Request, call_next):
        request.state.pagination = parse_pagination(
            request.query_params.get(self._offset_param),
            request.query_params.get(self._limit_param),
            self._default_limit,
            self._max_limit,
        )
        return await call_next(request)
