"""Transforms for Catalog, Category, ProductOffering and ProductSpecification."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.product_catalog import (
    CatalogCreate,
    CategoryCreate,
    CategoryRef,
    ProductOfferingCreate,
    ProductSpecCharacteristic,
    ProductSpecificationCreate,
)

from .common import (
    base_dto,
    patch_values,
    put,
    put_fields,
    put_list,
    put_valid_for,
    render_related_party,
    scalar_values,
    type_tag_values,
    valid_for_values,
)

CATALOG_FIELDS = ("catalog_type", "description", "lifecycle_status", "name", "version")
CATEGORY_FIELDS = (
    "description", "is_root", "lifecycle_status", "name", "version", "parent_id",
)
PRODUCT_OFFERING_FIELDS = (
    "description", "is_bundle", "is_sellable", "lifecycle_status", "name",
    "status_reason", "version",
)
PRODUCT_SPECIFICATION_FIELDS = (
    "brand", "description", "is_bundle", "lifecycle_status", "name",
    "product_number", "version",
)
SPEC_CHARACTERISTIC_FIELDS = (
    "name", "description", "configurable", "extensible", "is_unique",
    "max_cardinality", "min_cardinality", "regex", "value_type",
    "product_spec_characteristic_value",
)


# ── Shared references ───────────────────────────────────────────────────────

def category_link_rows(items: list[CategoryRef]) -> list[dict[str, Any]]:
    return [{"category_id": item.id} for item in items]


def render_category_link(row: Any) -> dict[str, Any]:
    return {"id": row.category_id, "@referredType": "Category"}


def render_sub_category(row: Any) -> dict[str, Any]:
    dto: dict[str, Any] = {"id": row.id}
    put_fields(dto, row, ("href", "name", "version"))
    dto["@referredType"] = "Category"
    return dto


# ── Catalog ─────────────────────────────────────────────────────────────────

def catalog_values(data: CatalogCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "Catalog"),
        **scalar_values(data, CATALOG_FIELDS),
        **valid_for_values(data.valid_for),
    }


def catalog_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, CATALOG_FIELDS)
    put(dto, "lastUpdate", row.last_update)
    put_valid_for(dto, row)
    put_list(dto, "category", record.children.get("category"), render_category_link)
    put_list(
        dto, "relatedParty", record.children.get("related_party"), render_related_party
    )
    return dto


# ── Category ────────────────────────────────────────────────────────────────

def category_values(data: CategoryCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "Category"),
        **scalar_values(data, CATEGORY_FIELDS),
        **valid_for_values(data.valid_for),
    }


def category_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, CATEGORY_FIELDS)
    put(dto, "lastUpdate", row.last_update)
    put_valid_for(dto, row)
    put_list(
        dto, "subCategory", record.children.get("sub_category"), render_sub_category
    )
    return dto


# ── ProductOffering ─────────────────────────────────────────────────────────

def product_offering_values(data: ProductOfferingCreate) -> dict[str, Any]:
    values = {
        **type_tag_values(data, "ProductOffering"),
        **scalar_values(data, PRODUCT_OFFERING_FIELDS),
        **valid_for_values(data.valid_for),
    }
    if data.product_specification is not None:
        values["product_specification_id"] = data.product_specification.id
    return values


def product_offering_patch(data: ProductOfferingCreate) -> dict[str, Any]:
    values = patch_values(data, PRODUCT_OFFERING_FIELDS)
    if "product_specification" in data.model_fields_set:
        ref = data.product_specification
        values["product_specification_id"] = ref.id if ref is not None else None
    return values


def product_offering_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, PRODUCT_OFFERING_FIELDS)
    put(dto, "lastUpdate", row.last_update)
    put_valid_for(dto, row)
    if row.product_specification_id:
        dto["productSpecification"] = {
            "id": row.product_specification_id,
            "@referredType": "ProductSpecification",
        }
    put_list(dto, "category", record.children.get("category"), render_category_link)
    return dto


# ── ProductSpecification ────────────────────────────────────────────────────

def spec_characteristic_rows(
    items: list[ProductSpecCharacteristic],
) -> list[dict[str, Any]]:
    return [
        {
            **scalar_values(item, SPEC_CHARACTERISTIC_FIELDS),
            **valid_for_values(item.valid_for),
        }
        for item in items
    ]


def render_spec_characteristic(row: Any) -> dict[str, Any]:
    dto: dict[str, Any] = {"id": row.id}
    put_fields(dto, row, SPEC_CHARACTERISTIC_FIELDS)
    put_valid_for(dto, row)
    return dto


def product_specification_values(data: ProductSpecificationCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "ProductSpecification"),
        **scalar_values(data, PRODUCT_SPECIFICATION_FIELDS),
        **valid_for_values(data.valid_for),
    }


def product_specification_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, PRODUCT_SPECIFICATION_FIELDS)
    put(dto, "lastUpdate", row.last_update)
    put_valid_for(dto, row)
    put_list(
        dto,
        "productSpecCharacteristic",
        record.children.get("product_spec_characteristic"),
        render_spec_characteristic,
    )
    return dto
