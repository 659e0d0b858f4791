"""ORM models for the TMF629 Customer tables."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from tmf_api.infrastructure.database.base import Base
from tmf_api.infrastructure.database.columns import (
    CharacteristicColumnsMixin,
    ContactMediumColumnsMixin,
    RelatedPartyColumnsMixin,
    TMForumEntityMixin,
    ValidForMixin,
)


class CustomerModel(TMForumEntityMixin, ValidForMixin, Base):
    """A party playing the customer role; the engaged party is copied, not joined."""

    __tablename__ = "customers"

    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    status_reason: Mapped[str | None] = mapped_column(String(500), nullable=True)
    engaged_party_id: Mapped[str] = mapped_column(String(100), nullable=False)
    engaged_party_href: Mapped[str | None] = mapped_column(String(500), nullable=True)
    engaged_party_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    engaged_party_referred_type: Mapped[str] = mapped_column(
        String(100), nullable=False,
    )

    def __repr__(self) -> str:
        return f"<CustomerModel(id={self.id}, name='{self.name}')>"


class CustomerCharacteristicModel(CharacteristicColumnsMixin, Base):
    __tablename__ = "customer_characteristics"

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )


class CustomerContactMediumModel(ContactMediumColumnsMixin, Base):
    __tablename__ = "customer_contact_mediums"

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )


class CustomerRelatedPartyModel(RelatedPartyColumnsMixin, Base):
    __tablename__ = "customer_related_parties"

    customer_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        index=True,
    )
