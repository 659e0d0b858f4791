"""Transforms for the Customer entity."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.customer import CustomerCreate, CustomerUpdate

from .common import (
    base_dto,
    patch_values,
    put,
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

CUSTOMER_FIELDS = ("name", "status", "status_reason")


def _engaged_party_values(data: CustomerCreate | CustomerUpdate) -> dict[str, Any]:
    party = data.engaged_party
    return {
        "engaged_party_id": party.id,
        "engaged_party_href": party.href,
        "engaged_party_name": party.name,
        "engaged_party_referred_type": party.referred_type,
    }


def customer_values(data: CustomerCreate) -> dict[str, Any]:
    return {
        **type_tag_values(data, "Customer"),
        **scalar_values(data, CUSTOMER_FIELDS),
        **valid_for_values(data.valid_for),
        **_engaged_party_values(data),
    }


def customer_patch(data: CustomerUpdate) -> dict[str, Any]:
    values = patch_values(data, CUSTOMER_FIELDS)
    # engagedParty is mandatory on the row; a null in a patch leaves it as is.
    if data.engaged_party is not None:
        values.update(_engaged_party_values(data))
    return values


def customer_to_dto(record: EntityRecord) -> dict[str, Any]:
    row = record.row
    dto = base_dto(row)
    put_fields(dto, row, CUSTOMER_FIELDS)
    put_valid_for(dto, row)
    engaged_party: dict[str, Any] = {
        "id": row.engaged_party_id,
        "@referredType": row.engaged_party_referred_type,
    }
    put(engaged_party, "href", row.engaged_party_href)
    put(engaged_party, "name", row.engaged_party_name)
    dto["engagedParty"] = engaged_party
    put_list(
        dto, "characteristic", record.children.get("characteristic"),
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
    return dto
