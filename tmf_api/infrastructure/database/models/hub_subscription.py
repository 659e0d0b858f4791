"""ORM model for hub event subscriptions."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from tmf_api.infrastructure.database.base import Base
from tmf_api.infrastructure.database.columns import _generate_uuid


class EventSubscriptionModel(Base):
    """ORM model — maps to the 'event_subscriptions' table."""

    __tablename__ = "event_subscriptions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_generate_uuid)
    api: Mapped[str] = mapped_column(String(100), nullable=False)
    callback: Mapped[str] = mapped_column(String(500), nullable=False)
    query: Mapped[str | None] = mapped_column(String(1000), nullable=True)

    __table_args__ = (Index("ix_event_subscriptions_api", "api"),)

    def __repr__(self) -> str:
        return f"<EventSubscriptionModel(id={self.id}, api='{self.api}')>"
