"""TMF632 Party Management endpoints."""

from fastapi import APIRouter

from tmf_api.application.schemas import (
    IndividualCreate,
    IndividualUpdate,
    OrganizationCreate,
    OrganizationUpdate,
)
from tmf_api.domain.apis import PARTY
from tmf_api.infrastructure.dependencies import (
    get_individual_service,
    get_organization_service,
    hub_service_provider,
)

from .hub import build_hub_router
from .resource_router import build_resource_router

TAG = "Party"

router = APIRouter(prefix=PARTY.base_path)
router.include_router(
    build_resource_router(
        resource_path="individual",
        entity_name="Individual",
        create_schema=IndividualCreate,
        update_schema=IndividualUpdate,
        get_service=get_individual_service,
        tag=TAG,
    )
)
router.include_router(
    build_resource_router(
        resource_path="organization",
        entity_name="Organization",
        create_schema=OrganizationCreate,
        update_schema=OrganizationUpdate,
        get_service=get_organization_service,
        tag=TAG,
    )
)
router.include_router(build_hub_router(hub_service_provider(PARTY), tag=TAG))
