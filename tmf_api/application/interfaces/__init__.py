from .entity_repository import EntityRecord, EntityRepository
from .event_publisher import EventPublisher
from .hub_subscription_repository import HubSubscriptionRepository
from .webhook_client import WebhookClient

__all__ = [
    "EntityRecord",
    "EntityRepository",
    "EventPublisher",
    "HubSubscriptionRepository",
    "WebhookClient",
]
