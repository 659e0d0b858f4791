"""Column groups shared by the TMF tables.

Every resource table carries the entity columns; the remaining mixins are
opt-in per table. Child tables declare their own parent foreign key.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column


def _generate_uuid() -> str:
    return str(uuid.uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TMForumEntityMixin:
    """id, self-link, type tags and storage timestamps."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)
    href: Mapped[str | None] = mapped_column(String(500), nullable=True)
    type: Mapped[str] = mapped_column(String(100), nullable=False)
    base_type: Mapped[str | None] = mapped_column(String(100), nullable=True)
    schema_location: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, nullable=False,
    )


class ValidForMixin:
    valid_for_start: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    valid_for_end: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )


class LifecycleMixin:
    lifecycle_status: Mapped[str | None] = mapped_column(String(50), nullable=True)
    last_update: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )


class ChildRowMixin:
    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)


class RelatedPartyColumnsMixin(ChildRowMixin):
    referenced_party_id: Mapped[str | None] = mapped_column(String(100), nullable=True)
    referenced_party_href: Mapped[str | None] = mapped_column(String(500), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(String(100), nullable=False)
    referred_type: Mapped[str] = mapped_column(String(100), nullable=False)


class CharacteristicColumnsMixin(ChildRowMixin):
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)
    value_type: Mapped[str | None] = mapped_column(String(100), nullable=True)


class ContactMediumColumnsMixin(ChildRowMixin, ValidForMixin):
    medium_type: Mapped[str] = mapped_column(String(100), nullable=False)
    preferred: Mapped[bool | None] = mapped_column(Boolean, default=False, nullable=True)
    characteristic: Mapped[dict | None] = mapped_column(JSON, nullable=True)
