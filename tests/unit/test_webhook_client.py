"""Unit tests for the HttpxWebhookClient."""

import json

import httpx
import pytest

from tmf_api.infrastructure.webhooks import HttpxWebhookClient


# ── Helpers ──


def _make_mock_transport(
    status_code: int = 201,
    captured: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that records requests and returns a fixed status."""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(status_code)

    return httpx.MockTransport(handler)


EVENT = {"eventId": "e-1", "eventType": "CustomerCreateEvent", "event": {"customer": {}}}


# ── Tests ──


@pytest.mark.asyncio
async def test_post_event_sends_json_payload():
    captured: list[httpx.Request] = []
    http_client = httpx.AsyncClient(transport=_make_mock_transport(captured=captured))
    client = HttpxWebhookClient(http_client=http_client)

    await client.post_event("http://listener.test/events", EVENT)
    await http_client.aclose()

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "POST"
    assert str(request.url) == "http://listener.test/events"
    assert request.headers["content-type"] == "application/json"
    assert json.loads(request.content) == EVENT


@pytest.mark.asyncio
async def test_post_event_raises_on_error_status():
    http_client = httpx.AsyncClient(transport=_make_mock_transport(status_code=503))
    client = HttpxWebhookClient(http_client=http_client)

    with pytest.raises(httpx.HTTPStatusError):
        await client.post_event("http://listener.test/events", EVENT)
    await http_client.aclose()


@pytest.mark.asyncio
async def test_injected_client_is_left_open():
    http_client = httpx.AsyncClient(transport=_make_mock_transport())
    client = HttpxWebhookClient(http_client=http_client)

    await client.post_event("http://listener.test/a", EVENT)
    await client.post_event("http://listener.test/b", EVENT)

    assert not http_client.is_closed
    await http_client.aclose()
