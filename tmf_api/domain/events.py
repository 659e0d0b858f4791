"""TM Forum notification events."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4


@dataclass
class TMForumEvent:
    """A change notification as delivered to hub subscribers."""

    event_type: str
    domain: str
    title: str
    event: dict[str, Any]
    description: str | None = None
    correlation_id: str | None = None
    event_id: str = field(default_factory=lambda: str(uuid4()))
    event_time: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Wire representation; optional keys are omitted when unset."""
        payload: dict[str, Any] = {
            "eventId": self.event_id,
            "eventTime": self.event_time.isoformat(timespec="milliseconds").replace(
                "+00:00", "Z"
            ),
            "eventType": self.event_type,
            "domain": self.domain,
            "title": self.title,
            "event": self.event,
        }
        if self.correlation_id is not None:
            payload["correlationId"] = self.correlation_id
        if self.description is not None:
            payload["description"] = self.description
        return payload
