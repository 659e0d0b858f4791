"""Use cases for the TMF673 GeographicAddress entity."""

from typing import Any

from tmf_api.application.interfaces import EntityRecord
from tmf_api.application.schemas.geographic_address import (
    GeographicAddressCreate,
    GeographicAddressUpdate,
)
from tmf_api.application.transforms.geographic_address import (
    address_patch,
    address_to_dto,
    address_values,
    sub_address_rows,
    sub_address_to_dto,
)
from tmf_api.domain.apis import GEOGRAPHIC_ADDRESS

from .entity_service import EntityService

SUB_ADDRESS_PATH = "geographicSubAddress"


class GeographicAddressService(EntityService):
    """Addresses own sub-addresses, each addressable under its parent."""

    api = GEOGRAPHIC_ADDRESS
    entity_name = "GeographicAddress"
    resource_path = "geographicAddress"
    child_builders = {"geographic_sub_address": sub_address_rows}

    def _create_values(self, data: GeographicAddressCreate) -> dict[str, Any]:
        return address_values(data)

    def _update_values(self, data: GeographicAddressUpdate) -> dict[str, Any]:
        return address_patch(data)

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        return address_to_dto(record)

    def _child_href(self, collection: str, parent_id: str, child_id: str) -> str | None:
        if collection != "geographic_sub_address":
            return None
        return self.api.href(
            self._base_url, self.resource_path, parent_id, SUB_ADDRESS_PATH, child_id
        )

    async def list_sub_addresses(self, address_id: str) -> list[dict[str, Any]] | None:
        """Sub-addresses of one address, or None when the address is absent."""
        record = await self._repository.get(address_id)
        if record is None:
            return None
        rows = record.children.get("geographic_sub_address", [])
        return [sub_address_to_dto(row) for row in rows]

    async def find_sub_address(
        self, address_id: str, sub_address_id: str
    ) -> dict[str, Any] | None:
        sub_addresses = await self.list_sub_addresses(address_id)
        for sub_address in sub_addresses or []:
            if sub_address["id"] == sub_address_id:
                return sub_address
        return None
