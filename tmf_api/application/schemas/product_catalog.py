"""Pydantic DTOs for the TMF620 Product Catalog family."""

from typing import Any

from pydantic import Field

from .common import RelatedPartyRef, TimePeriod, TMFModel, TypedModel


class CategoryRef(TMFModel):
    """Reference to an existing category."""

    id: str
    href: str | None = None
    name: str | None = None
    version: str | None = None
    referred_type: str | None = Field(None, alias="@referredType")
    type: str | None = Field(None, alias="@type")


class ProductSpecificationRef(TMFModel):
    """Reference to an existing product specification."""

    id: str
    href: str | None = None
    name: str | None = None
    version: str | None = None
    referred_type: str | None = Field(None, alias="@referredType")
    type: str | None = Field(None, alias="@type")


class ProductSpecCharacteristic(TMFModel):
    """A configurable characteristic of a product specification."""

    name: str | None = None
    description: str | None = None
    configurable: bool | None = None
    extensible: bool | None = None
    is_unique: bool | None = None
    max_cardinality: int | None = None
    min_cardinality: int | None = None
    regex: str | None = None
    value_type: str | None = None
    valid_for: TimePeriod | None = None
    product_spec_characteristic_value: list[Any] | None = None
    type: str | None = Field(None, alias="@type")


class CatalogCreate(TypedModel):
    """Schema for creating a catalog."""

    catalog_type: str | None = None
    description: str | None = None
    lifecycle_status: str | None = None
    name: str | None = Field(None, examples=["Consumer Catalog"])
    version: str | None = None
    valid_for: TimePeriod | None = None
    category: list[CategoryRef] | None = None
    related_party: list[RelatedPartyRef] | None = None


class CatalogUpdate(CatalogCreate):
    """Schema for patching a catalog — every field optional."""


class CategoryCreate(TypedModel):
    """Schema for creating a category."""

    description: str | None = None
    is_root: bool | None = None
    lifecycle_status: str | None = None
    name: str | None = Field(None, examples=["Mobile"])
    version: str | None = None
    parent_id: str | None = None
    valid_for: TimePeriod | None = None


class CategoryUpdate(CategoryCreate):
    """Schema for patching a category — every field optional."""


class ProductOfferingCreate(TypedModel):
    """Schema for creating a product offering."""

    description: str | None = None
    is_bundle: bool | None = None
    is_sellable: bool | None = None
    lifecycle_status: str | None = None
    name: str | None = Field(None, examples=["Unlimited Plan"])
    status_reason: str | None = None
    version: str | None = None
    valid_for: TimePeriod | None = None
    category: list[CategoryRef] | None = None
    product_specification: ProductSpecificationRef | None = None


class ProductOfferingUpdate(ProductOfferingCreate):
    """Schema for patching a product offering — every field optional."""


class ProductSpecificationCreate(TypedModel):
    """Schema for creating a product specification."""

    brand: str | None = None
    description: str | None = None
    is_bundle: bool | None = None
    lifecycle_status: str | None = None
    name: str | None = Field(None, examples=["5G Router"])
    product_number: str | None = None
    version: str | None = None
    valid_for: TimePeriod | None = None
    product_spec_characteristic: list[ProductSpecCharacteristic] | None = None


class ProductSpecificationUpdate(ProductSpecificationCreate):
    """Schema for patching a product specification — every field optional."""
