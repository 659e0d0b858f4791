from .hub_event_publisher import HubEventPublisher

__all__ = ["HubEventPublisher"]
