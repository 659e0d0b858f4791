"""Transforms for GeographicAddress and its owned sub-addresses."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.geographic_address import (
    GeographicAddressCreate,
    GeographicLocation,
    GeographicSubAddressCreate,
)

from .common import (
    base_dto,
    patch_values,
    put,
    put_fields,
    put_list,
    scalar_values,
    type_tag_values,
)

ADDRESS_FIELDS = (
    "city", "country", "locality", "name", "postcode", "state_or_province",
    "street_name", "street_nr", "street_nr_last", "street_nr_last_suffix",
    "street_nr_suffix", "street_suffix", "street_type",
)
SUB_ADDRESS_FIELDS = (
    "building_name", "level_number", "level_type", "name",
    "private_street_name", "private_street_number", "sub_address_type",
    "sub_unit_number", "sub_unit_type",
)


def _location_document(location: GeographicLocation | None) -> dict[str, Any] | None:
    if location is None:
        return None
    return location.model_dump(by_alias=True, exclude_none=True)


def address_values(data: GeographicAddressCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "GeographicAddress"),
        **scalar_values(data, ADDRESS_FIELDS),
        "geographic_location": _location_document(data.geographic_location),
    }


def address_patch(data: GeographicAddressCreate) -> dict[str, Any]:
    values = patch_values(data, ADDRESS_FIELDS)
    if "geographic_location" in data.model_fields_set:
        values["geographic_location"] = _location_document(data.geographic_location)
    return values


def sub_address_rows(items: list[GeographicSubAddressCreate]) -> list[dict[str, Any]]:
    return [
        {
            **type_tag_values(item, "GeographicSubAddress"),
            **scalar_values(item, SUB_ADDRESS_FIELDS),
        }
        for item in items
    ]


def sub_address_to_dto(row: Any) -> dict[str, Any]:
    dto = base_dto(row)
    put_fields(dto, row, SUB_ADDRESS_FIELDS)
    return dto


def address_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, ADDRESS_FIELDS)
    put(dto, "geographicLocation", row.geographic_location)
    put_list(
        dto, "geographicSubAddress", record.children.get("geographic_sub_address"),
        sub_address_to_dto,
    )
    return dto
