"""Use cases for the TMF629 Customer entity."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.customer import CustomerCreate, CustomerUpdate
from tmf_api.application.transforms.common import (
    characteristic_rows,
    contact_medium_rows,
    related_party_rows,
    valid_for_patch,
)
from tmf_api.application.transforms.customer import (
    customer_patch,
    customer_to_dto,
    customer_values,
)
from tmf_api.domain.apis import CUSTOMER

from .entity_service import EntityService


class CustomerService(EntityService):
    api = CUSTOMER
    entity_name = "Customer"
    resource_path = "customer"
    child_builders = {
        "characteristic": characteristic_rows,
        "contact_medium": contact_medium_rows,
        "related_party": related_party_rows,
    }

    def _create_values(self, data: CustomerCreate) -> dict[str, Any]:
        return customer_values(data)

    def _update_values(self, data: CustomerUpdate) -> dict[str, Any]:
        return {**customer_patch(data), **valid_for_patch(data)}

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return customer_to_dto(record)
