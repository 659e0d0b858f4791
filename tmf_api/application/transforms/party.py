"""Transforms for the Individual and Organization party kinds."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.party import IndividualCreate, OrganizationCreate

from .common import (
    base_dto,
    put_fields,
    put_list,
    put_valid_for,
    render_characteristic,
    render_contact_medium,
    render_related_party,
    scalar_values,
    type_tag_values,
    valid_for_values,
)

INDIVIDUAL_FIELDS = (
    "gender", "place_of_birth", "country_of_birth", "nationality",
    "marital_status", "birth_date", "death_date", "title", "given_name",
    "family_name", "middle_name", "full_name", "formatted_name", "location",
    "status",
)
ORGANIZATION_FIELDS = (
    "is_head_office", "is_legal_entity", "name", "name_type",
    "organization_type", "trading_name", "status",
)


def _party_children(dto: dict[str, Any], record: EntityRecord) -> None:
    put_list(
        dto, "partyCharacteristic", record.children.get("party_characteristic"),
        render_characteristic,
    )
    put_list(
        dto, "contactMedium", record.children.get("contact_medium"),
        render_contact_medium,
    )
    put_list(
        dto, "relatedParty", record.children.get("related_party"),
        render_related_party,
    )


def individual_values(data: IndividualCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "Individual", "Party"),
        **scalar_values(data, INDIVIDUAL_FIELDS),
        **valid_for_values(data.valid_for),
    }


def individual_to_dto(record: EntityRecord) -> dict[str, Any]:
    dto = base_dto(record.row)
    put_fields(dto, record.row, INDIVIDUAL_FIELDS)
    put_valid_for(dto, record.row)
    _party_children(dto, record)
    return dto


def organization_values(data: OrganizationCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "Organization", "Party"),
        **scalar_values(data, ORGANIZATION_FIELDS),
        **valid_for_values(data.valid_for),
    }


def organization_to_dto(record: EntityRecord) -> dict[str, Any]:
    dto = base_dto(record.row)
    put_fields(dto, record.row, ORGANIZATION_FIELDS)
    put_valid_for(dto, record.row)
    _party_children(dto, record)
    return dto
