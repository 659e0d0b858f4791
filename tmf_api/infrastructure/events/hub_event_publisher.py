"""Event publisher that fans events out through an API family's hub."""

from tmf_api.application.interfaces import EventPublisher
from tmf_api.application.services.hub_service import HubService
from tmf_api.domain.events import TMForumEvent


class HubEventPublisher(EventPublisher):
    """Holds events until ``flush`` hands them to the hub's current subscribers.

    The request wiring flushes after the transaction commits, so listeners
    never hear about a change they cannot read back.
    """

    def __init__(self, hub_service: HubService):
        self._hub_service = hub_service
        self._pending: list[TMForumEvent] = []

    @property
    def pending(self) -> list[TMForumEvent]:
        return list(self._pending)

    async def publish(self, event: TMForumEvent) -> None:
        self._pending.append(event)

    async def flush(self) -> None:
        pending, self._pending = self._pending, []
        for event in pending:
            await self._hub_service.deliver_event(event.to_dict())
