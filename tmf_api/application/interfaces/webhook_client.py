"""Abstract outbound webhook client (port)."""

from abc import ABC, abstractmethod
from typing import Any


class WebhookClient(ABC):
    """Delivers one JSON payload to one callback URL.

    Implementations raise on transport errors and non-2xx responses; the hub
    service decides what a failure means.
    """

    @abstractmethod
    async def post_event(self, callback: str, payload: dict[str, Any]) -> None:
        ...
