"""Pydantic DTOs for hub (event subscription) registration."""

from pydantic import Field

from .common import TMFModel


class HubSubscriptionCreate(TMFModel):
    """Schema for registering a listener callback."""

    callback: str = Field(
        ..., min_length=1, examples=["https://listener.example.com/events"],
    )
    query: str | None = Field(None, examples=["eventType=CatalogCreateEvent"])


class HubSubscriptionResponse(TMFModel):
    """Schema returned after a subscription is registered."""

    id: str
    callback: str
    query: str | None = None
