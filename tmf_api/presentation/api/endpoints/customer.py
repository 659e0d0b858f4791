"""TMF629 Customer Management endpoints."""

from fastapi import APIRouter

from tmf_api.application.schemas import CustomerCreate, CustomerUpdate
from tmf_api.domain.apis import CUSTOMER
from tmf_api.infrastructure.dependencies import get_customer_service, hub_service_provider

from .hub import build_hub_router
from .resource_router import build_resource_router

TAG = "Customer"

router = APIRouter(prefix=CUSTOMER.base_path)
router.include_router(
    build_resource_router(
        resource_path="customer",
        entity_name="Customer",
        create_schema=CustomerCreate,
        update_schema=CustomerUpdate,
        get_service=get_customer_service,
        tag=TAG,
    )
)
router.include_router(build_hub_router(hub_service_provider(CUSTOMER), tag=TAG))
