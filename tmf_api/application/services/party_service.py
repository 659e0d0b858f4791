"""Use cases for the TMF632 party kinds sharing the ``parties`` table."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.party import IndividualCreate, OrganizationCreate
from tmf_api.application.transforms.common import (
    characteristic_rows,
    contact_medium_rows,
    related_party_rows,
)
from tmf_api.application.transforms.party import (
    INDIVIDUAL_FIELDS,
    ORGANIZATION_FIELDS,
    individual_to_dto,
    individual_values,
    organization_to_dto,
    organization_values,
)
from tmf_api.domain.apis import PARTY

from .entity_service import EntityService

PARTY_CHILD_BUILDERS = {
    "party_characteristic": characteristic_rows,
    "contact_medium": contact_medium_rows,
    "related_party": related_party_rows,
}


class IndividualService(EntityService):
    api = PARTY
    entity_name = "Individual"
    resource_path = "individual"
    patch_fields = INDIVIDUAL_FIELDS
    child_builders = PARTY_CHILD_BUILDERS

    def _create_values(self, data: IndividualCreate) -> dict[str, Any]:
        return individual_values(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return individual_to_dto(record)


class OrganizationService(EntityService):
    api = PARTY
    entity_name = "Organization"
    resource_path = "organization"
    patch_fields = ORGANIZATION_FIELDS
    child_builders = PARTY_CHILD_BUILDERS

    def _create_values(self, data: OrganizationCreate) -> dict[str, Any]:
        return organization_values(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return organization_to_dto(record)
