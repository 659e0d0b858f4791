"""Domain entity — a webhook registration on an API family's hub."""

from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4


@dataclass
class HubSubscription:
    """Callback URL (optionally filtered by an opaque query) for change events.

    Subscriptions are scoped to one API family; a product catalog hub never
    delivers to subscribers registered on the customer hub.
    """

    api: str
    callback: str
    query: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id, "callback": self.callback}
        if self.query is not None:
            payload["query"] = self.query
        return payload
