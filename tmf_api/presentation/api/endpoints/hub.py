"""Hub endpoints — listener registration for one API family."""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Response, status

from tmf_api.application.schemas import (
    ErrorResponse,
    HubSubscriptionCreate,
    HubSubscriptionResponse,
)
from tmf_api.application.services import HubService
from tmf_api.domain.exceptions import NotFoundError


def build_hub_router(get_hub_service: Callable[..., Any], tag: str) -> APIRouter:
    router = APIRouter(
        prefix="/hub",
        tags=[tag],
        responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    )

    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=HubSubscriptionResponse,
        response_model_exclude_none=True,
    )
    async def register_listener(
        data: HubSubscriptionCreate,
        service: HubService = Depends(get_hub_service),
    ) -> dict[str, Any]:
        """Register a callback for this API family's change events."""
        subscription = await service.create_subscription(data.callback, data.query)
        return subscription.to_dict()

    @router.delete("/{subscription_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def unregister_listener(
        subscription_id: str,
        service: HubService = Depends(get_hub_service),
    ) -> Response:
        if not await service.delete_subscription(subscription_id):
            raise NotFoundError("Hub subscription", subscription_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
