"""Abstract repository interface (port) for hub subscriptions."""

from abc import ABC, abstractmethod

from tmf_api.domain.entities import HubSubscription


class HubSubscriptionRepository(ABC):
    """Port for subscription persistence, scoped to one API family."""

    @abstractmethod
    async def create(self, subscription: HubSubscription) -> HubSubscription:
        """Persist a new subscription and return it."""
        ...

    @abstractmethod
    async def get_by_id(self, subscription_id: str) -> HubSubscription | None:
        ...

    @abstractmethod
    async def delete(self, subscription_id: str) -> bool:
        """Delete a subscription. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def list_all(self) -> list[HubSubscription]:
        """Every subscription currently registered on this hub."""
        ...
