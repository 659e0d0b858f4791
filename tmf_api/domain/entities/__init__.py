from .hub_subscription import HubSubscription
from .pagination import DEFAULT_LIMIT, MAX_LIMIT, Page, PaginationParams

__all__ = [
    "HubSubscription",
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "Page",
    "PaginationParams",
]
