"""Top-level API router — health plus one sub-router per enabled API family."""

from fastapi import APIRouter

from tmf_api.presentation.api.endpoints import (
    customer,
    geographic_address,
    health,
    party,
    product_catalog,
)

_FAMILY_ROUTERS: dict[str, APIRouter] = {
    "productCatalogManagement": product_catalog.router,
    "customerManagement": customer.router,
    "partyManagement": party.router,
    "geographicAddressManagement": geographic_address.router,
}


def build_api_router(enabled_apis: list[str]) -> APIRouter:
    router = APIRouter()
    router.include_router(health.router)
    for name in enabled_apis:
        family_router = _FAMILY_ROUTERS.get(name)
        if family_router is not None:
            router.include_router(family_router)
    return router
