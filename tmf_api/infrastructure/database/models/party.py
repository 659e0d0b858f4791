"""ORM models for the TMF632 Party tables.

Individuals and organizations share ``parties``; ``party_type`` tells them
apart and every query filters on it.
"""

from datetime import date

from sqlalchemy import Boolean, Date, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tmf_api.infrastructure.database.base import Base
from tmf_api.infrastructure.database.columns import (
    CharacteristicColumnsMixin,
    ContactMediumColumnsMixin,
    RelatedPartyColumnsMixin,
    TMForumEntityMixin,
    ValidForMixin,
)

INDIVIDUAL = "individual"
ORGANIZATION = "organization"


class PartyModel(TMForumEntityMixin, ValidForMixin, Base):
    __tablename__ = "parties"

    party_type: Mapped[str] = mapped_column(String(20), nullable=False)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Individual
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    place_of_birth: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country_of_birth: Mapped[str | None] = mapped_column(String(100), nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    death_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    title: Mapped[str | None] = mapped_column(String(50), nullable=True)
    given_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    family_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    middle_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    full_name: Mapped[str | None] = mapped_column(String(500), nullable=True)
    formatted_name: Mapped[str | None] = mapped_column(String(500), nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Organization
    is_head_office: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    is_legal_entity: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    organization_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    trading_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (Index("ix_parties_party_type", "party_type"),)

    def __repr__(self) -> str:
        return f"<PartyModel(id={self.id}, party_type='{self.party_type}')>"


class PartyCharacteristicModel(CharacteristicColumnsMixin, Base):
    __tablename__ = "party_characteristics"

    party_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("parties.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )


class PartyContactMediumModel(ContactMediumColumnsMixin, Base):
    __tablename__ = "party_contact_mediums"

    party_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("parties.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )


class PartyRelatedPartyModel(RelatedPartyColumnsMixin, Base):
    __tablename__ = "party_related_parties"

    party_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("parties.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
