"""TMF620 Product Catalog Management endpoints."""

from fastapi import APIRouter

from tmf_api.application.schemas import (
    CatalogCreate,
    CatalogUpdate,
    CategoryCreate,
    CategoryUpdate,
    ProductOfferingCreate,
    ProductOfferingUpdate,
    ProductSpecificationCreate,
    ProductSpecificationUpdate,
)
from tmf_api.domain.apis import PRODUCT_CATALOG
from tmf_api.infrastructure.dependencies import (
    get_catalog_service,
    get_category_service,
    get_product_offering_service,
    get_product_specification_service,
    hub_service_provider,
)

from .hub import build_hub_router
from .resource_router import build_resource_router

TAG = "Product Catalog"

router = APIRouter(prefix=PRODUCT_CATALOG.base_path)
router.include_router(
    build_resource_router(
        resource_path="catalog",
        entity_name="Catalog",
        create_schema=CatalogCreate,
        update_schema=CatalogUpdate,
        get_service=get_catalog_service,
        tag=TAG,
    )
)
router.include_router(
    build_resource_router(
        resource_path="category",
        entity_name="Category",
        create_schema=CategoryCreate,
        update_schema=CategoryUpdate,
        get_service=get_category_service,
        tag=TAG,
    )
)
router.include_router(
    build_resource_router(
        resource_path="productOffering",
        entity_name="ProductOffering",
        create_schema=ProductOfferingCreate,
        update_schema=ProductOfferingUpdate,
        get_service=get_product_offering_service,
        tag=TAG,
    )
)
router.include_router(
    build_resource_router(
        resource_path="productSpecification",
        entity_name="ProductSpecification",
        create_schema=ProductSpecificationCreate,
        update_schema=ProductSpecificationUpdate,
        get_service=get_product_specification_service,
        tag=TAG,
    )
)
router.include_router(build_hub_router(hub_service_provider(PRODUCT_CATALOG), tag=TAG))
