"""TMF673 Geographic Address Management endpoints."""

from typing import Any

from fastapi import APIRouter, Depends

from tmf_api.application.schemas import GeographicAddressCreate, GeographicAddressUpdate
from tmf_api.application.services import GeographicAddressService
from tmf_api.domain.apis import GEOGRAPHIC_ADDRESS
from tmf_api.domain.exceptions import NotFoundError
from tmf_api.infrastructure.dependencies import (
    get_geographic_address_service,
    hub_service_provider,
)

from .hub import build_hub_router
from .resource_router import build_resource_router

TAG = "Geographic Address"

router = APIRouter(prefix=GEOGRAPHIC_ADDRESS.base_path)


# Registered ahead of the generic routes; both are more specific than /{id}
@router.get("/geographicAddress/{address_id}/geographicSubAddress", tags=[TAG])
async def list_sub_addresses(
    address_id: str,
    service: GeographicAddressService = Depends(get_geographic_address_service),
) -> list[dict[str, Any]]:
    """Sub-addresses owned by one address."""
    sub_addresses = await service.list_sub_addresses(address_id)
    if sub_addresses is None:
        raise NotFoundError("GeographicAddress", address_id)
    return sub_addresses


@router.get(
    "/geographicAddress/{address_id}/geographicSubAddress/{sub_address_id}",
    tags=[TAG],
)
async def get_sub_address(
    address_id: str,
    sub_address_id: str,
    service: GeographicAddressService = Depends(get_geographic_address_service),
) -> dict[str, Any]:
    sub_address = await service.find_sub_address(address_id, sub_address_id)
    if sub_address is None:
        raise NotFoundError("GeographicSubAddress", sub_address_id)
    return sub_address


router.include_router(
    build_resource_router(
        resource_path="geographicAddress",
        entity_name="GeographicAddress",
        create_schema=GeographicAddressCreate,
        update_schema=GeographicAddressUpdate,
        get_service=get_geographic_address_service,
        tag=TAG,
    )
)
router.include_router(build_hub_router(hub_service_provider(GEOGRAPHIC_ADDRESS), tag=TAG))
