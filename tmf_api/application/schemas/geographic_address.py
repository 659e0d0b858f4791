"""Pydantic DTOs for the TMF673 Geographic Address family."""

from typing import Any

from pydantic import Field

from .common import TypedModel


class GeographicLocation(TypedModel):
    """Geometry attached to an address; stored as an opaque JSON document."""

    id: str | None = None
    href: str | None = None
    name: str | None = None
    geometry_type: str | None = None
    accuracy: str | None = None
    spatial_ref: str | None = None
    geometry: list[Any] | None = None


class GeographicSubAddressCreate(TypedModel):
    """A sub-unit (flat, floor, building) within an address."""

    building_name: str | None = None
    level_number: str | None = None
    level_type: str | None = None
    name: str | None = None
    private_street_name: str | None = None
    private_street_number: str | None = None
    sub_address_type: str | None = None
    sub_unit_number: str | None = Field(None, examples=["101"])
    sub_unit_type: str | None = Field(None, examples=["Apartment"])


class GeographicAddressCreate(TypedModel):
    """Schema for creating a geographic address."""

    city: str | None = Field(None, examples=["Springfield"])
    country: str | None = None
    locality: str | None = None
    name: str | None = None
    postcode: str | None = None
    state_or_province: str | None = None
    street_name: str | None = Field(None, examples=["Main Street"])
    street_nr: str | None = Field(None, examples=["123"])
    street_nr_last: str | None = None
    street_nr_last_suffix: str | None = None
    street_nr_suffix: str | None = None
    street_suffix: str | None = None
    street_type: str | None = None
    geographic_location: GeographicLocation | None = None
    geographic_sub_address: list[GeographicSubAddressCreate] | None = None


class GeographicAddressUpdate(GeographicAddressCreate):
    """Schema for patching an address — every field optional."""
