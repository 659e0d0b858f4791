"""Use cases for the TMF620 Product Catalog entities."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.product_catalog import (
    CatalogCreate,
    CategoryCreate,
    ProductOfferingCreate,
    ProductSpecificationCreate,
)
from tmf_api.application.transforms.common import related_party_rows, valid_for_patch
from tmf_api.application.transforms.product_catalog import (
    CATALOG_FIELDS,
    CATEGORY_FIELDS,
    PRODUCT_OFFERING_FIELDS,
    PRODUCT_SPECIFICATION_FIELDS,
    catalog_to_dto,
    catalog_values,
    category_link_rows,
    category_to_dto,
    category_values,
    product_offering_patch,
    product_offering_to_dto,
    product_offering_values,
    product_specification_to_dto,
    product_specification_values,
    spec_characteristic_rows,
)
from tmf_api.domain.apis import PRODUCT_CATALOG

from .entity_service import EntityService


class CatalogService(EntityService):
    api = PRODUCT_CATALOG
    entity_name = "Catalog"
    resource_path = "catalog"
    tracks_last_update = True
    patch_fields = CATALOG_FIELDS
    child_builders = {
        "category": category_link_rows,
        "related_party": related_party_rows,
    }

    def _create_values(self, data: CatalogCreate) -> dict[str, Any]:
        return catalog_values(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return catalog_to_dto(record)


class CategoryService(EntityService):
    """Categories form a tree through ``parentId``; ``subCategory`` is derived."""

    api = PRODUCT_CATALOG
    entity_name = "Category"
    resource_path = "category"
    tracks_last_update = True
    patch_fields = CATEGORY_FIELDS

    def _create_values(self, data: CategoryCreate) -> dict[str, Any]:
        return category_values(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return category_to_dto(record)


class ProductOfferingService(EntityService):
    api = PRODUCT_CATALOG
    entity_name = "ProductOffering"
    resource_path = "productOffering"
    tracks_last_update = True
    patch_fields = PRODUCT_OFFERING_FIELDS
    child_builders = {"category": category_link_rows}

    def _create_values(self, data: ProductOfferingCreate) -> dict[str, Any]:
        return product_offering_values(data)

    def _update_values(self, data: ProductOfferingCreate) -> dict[str, Any]:
        return {**product_offering_patch(data), **valid_for_patch(data)}

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return product_offering_to_dto(record)


class ProductSpecificationService(EntityService):
    api = PRODUCT_CATALOG
    entity_name = "ProductSpecification"
    resource_path = "productSpecification"
    tracks_last_update = True
    patch_fields = PRODUCT_SPECIFICATION_FIELDS
    child_builders = {"product_spec_characteristic": spec_characteristic_rows}

    def _create_values(self, data: ProductSpecificationCreate) -> dict[str, Any]:
        return product_specification_values(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return product_specification_to_dto(record)
