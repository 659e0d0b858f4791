"""Repository for the TMF673 Geographic Address tables."""

from tmf_api.infrastructure.database.models import (
    GeographicAddressModel,
    GeographicSubAddressModel,
)

from .entity_repository import ChildTable, SQLAlchemyEntityRepository


class SQLAlchemyGeographicAddressRepository(SQLAlchemyEntityRepository):
    model = GeographicAddressModel
    children = {
        "geographic_sub_address": ChildTable(
            GeographicSubAddressModel, "geographic_address_id"
        ),
    }
