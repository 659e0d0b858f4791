"""Hub use cases: listener registration and best-effort event fan-out."""

import asyncio
import logging
from typing import Any

from tmf_api.application.interfaces import HubSubscriptionRepository, WebhookClient
from tmf_api.domain.entities import HubSubscription

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 10


class HubService:
    """Manages one API family's subscriptions and delivers events to them.

    Delivery never fails the caller: each subscriber gets its own POST, at
    most ``max_concurrency`` in flight, and every failure is logged and
    dropped. There is no retry.
    """

    def __init__(
        self,
        api: str,
        repository: HubSubscriptionRepository,
        webhook_client: WebhookClient,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    ):
        self._api = api
        self._repository = repository
        self._webhook_client = webhook_client
        self._max_concurrency = max(1, max_concurrency)

    async def create_subscription(
        self, callback: str, query: str | None = None
    ) -> HubSubscription:
        subscription = HubSubscription(api=self._api, callback=callback, query=query)
        created = await self._repository.create(subscription)
        logger.info("Registered %s listener %s → %s", self._api, created.id, callback)
        return created

    async def delete_subscription(self, subscription_id: str) -> bool:
        deleted = await self._repository.delete(subscription_id)
        if deleted:
            logger.info("Removed listener %s", subscription_id)
        return deleted

    async def list_subscriptions(self) -> list[HubSubscription]:
        return await self._repository.list_all()

    async def deliver_event(self, event: dict[str, Any]) -> None:
        subscriptions = await self.list_subscriptions()
        if not subscriptions:
            return

        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def _deliver(subscription: HubSubscription) -> None:
            async with semaphore:
                try:
                    await self._webhook_client.post_event(subscription.callback, event)
                except Exception as exc:
                    logger.warning(
                        "Failed to deliver %s to %s: %s",
                        event.get("eventType", "event"),
                        subscription.callback,
                        exc,
                    )

        await asyncio.gather(*(_deliver(s) for s in subscriptions))
