"""Abstract event sink (port) for entity change notifications."""

from abc import ABC, abstractmethod

from tmf_api.domain.events import TMForumEvent


class EventPublisher(ABC):
    """Opaque publish(event) sink — transport is an infrastructure concern."""

    @abstractmethod
    async def publish(self, event: TMForumEvent) -> None:
        ...
