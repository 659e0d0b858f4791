"""Outbound webhook delivery over HTTP — implements the WebhookClient port."""

import logging
from typing import Any

import httpx

from tmf_api.application.interfaces import WebhookClient

logger = logging.getLogger(__name__)


class HttpxWebhookClient(WebhookClient):
    """POSTs event payloads as JSON with a per-delivery timeout.

    An injected ``http_client`` is reused (and owned by the caller);
    otherwise a short-lived client is opened for each delivery.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 5.0,
    ):
        self._http_client = http_client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the shared client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def post_event(self, callback: str, payload: dict[str, Any]) -> None:
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            response = await client.post(
                callback,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self._timeout,
            )
            response.raise_for_status()
            logger.debug("Delivered event to %s (%d)", callback, response.status_code)
        finally:
            if should_close:
                await client.aclose()
