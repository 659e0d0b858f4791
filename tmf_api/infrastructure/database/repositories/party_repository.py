"""Repositories for the polymorphic ``parties`` table."""

from tmf_api.infrastructure.database.models import (
    PartyCharacteristicModel,
    PartyContactMediumModel,
    PartyModel,
    PartyRelatedPartyModel,
)
from tmf_api.infrastructure.database.models.party import INDIVIDUAL, ORGANIZATION

from .entity_repository import ChildTable, SQLAlchemyEntityRepository

PARTY_CHILDREN = {
    "party_characteristic": ChildTable(PartyCharacteristicModel, "party_id"),
    "contact_medium": ChildTable(PartyContactMediumModel, "party_id"),
    "related_party": ChildTable(PartyRelatedPartyModel, "party_id"),
}


class SQLAlchemyIndividualRepository(SQLAlchemyEntityRepository):
    model = PartyModel
    children = PARTY_CHILDREN
    discriminator = ("party_type", INDIVIDUAL)


class SQLAlchemyOrganizationRepository(SQLAlchemyEntityRepository):
    model = PartyModel
    children = PARTY_CHILDREN
    discriminator = ("party_type", ORGANIZATION)
