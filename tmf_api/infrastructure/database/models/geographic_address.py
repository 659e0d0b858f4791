"""ORM models for the TMF673 Geographic Address tables."""

from typing import Any

from sqlalchemy import ForeignKey, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from tmf_api.infrastructure.database.base import Base
from tmf_api.infrastructure.database.columns import TMForumEntityMixin


class GeographicAddressModel(TMForumEntityMixin, Base):
    __tablename__ = "geographic_addresses"

    city: Mapped[str | None] = mapped_column(String(255), nullable=True)
    country: Mapped[str | None] = mapped_column(String(100), nullable=True)
    locality: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    postcode: Mapped[str | None] = mapped_column(String(50), nullable=True)
    state_or_province: Mapped[str | None] = mapped_column(String(100), nullable=True)
    street_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    street_nr: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_nr_last: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_nr_last_suffix: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_nr_suffix: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_suffix: Mapped[str | None] = mapped_column(String(50), nullable=True)
    street_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    geographic_location: Mapped[dict[str, Any] | None] = mapped_column(
        JSON, nullable=True,
    )

    def __repr__(self) -> str:
        return f"<GeographicAddressModel(id={self.id}, city='{self.city}')>"


class GeographicSubAddressModel(TMForumEntityMixin, Base):
    """A sub-unit owned by one address, with its own self-link."""

    __tablename__ = "geographic_sub_addresses"

    geographic_address_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("geographic_addresses.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    building_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    level_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    level_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    private_street_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    private_street_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sub_address_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    sub_unit_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sub_unit_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
