"""Repository for the TMF629 Customer tables."""

from tmf_api.infrastructure.database.models import (
    CustomerCharacteristicModel,
    CustomerContactMediumModel,
    CustomerModel,
    CustomerRelatedPartyModel,
)

from .entity_repository import ChildTable, SQLAlchemyEntityRepository


class SQLAlchemyCustomerRepository(SQLAlchemyEntityRepository):
    model = CustomerModel
    children = {
        "characteristic": ChildTable(CustomerCharacteristicModel, "customer_id"),
        "contact_medium": ChildTable(CustomerContactMediumModel, "customer_id"),
        "related_party": ChildTable(CustomerRelatedPartyModel, "customer_id"),
    }
