"""Concrete repository for hub subscriptions backed by SQLAlchemy."""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from tmf_api.application.interfaces import HubSubscriptionRepository
from tmf_api.domain.entities import HubSubscription
from tmf_api.infrastructure.database.models import EventSubscriptionModel


class SQLAlchemyHubSubscriptionRepository(HubSubscriptionRepository):
    """Implements the HubSubscriptionRepository port for one API family."""

    def __init__(self, session: AsyncSession, api: str):
        self._session = session
        self._api = api

    def _to_entity(self, model: EventSubscriptionModel) -> HubSubscription:
        """Map ORM model → domain entity."""
        return HubSubscription(
            id=model.id, api=model.api, callback=model.callback, query=model.query,
        )

    def _to_model(self, entity: HubSubscription) -> EventSubscriptionModel:
        """Map domain entity → ORM model (for creation)."""
        return EventSubscriptionModel(
            id=entity.id, api=entity.api, callback=entity.callback, query=entity.query,
        )

    async def create(self, subscription: HubSubscription) -> HubSubscription:
        model = self._to_model(subscription)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def get_by_id(self, subscription_id: str) -> HubSubscription | None:
        stmt = select(EventSubscriptionModel).where(
            EventSubscriptionModel.id == subscription_id,
            EventSubscriptionModel.api == self._api,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def delete(self, subscription_id: str) -> bool:
        stmt = delete(EventSubscriptionModel).where(
            EventSubscriptionModel.id == subscription_id,
            EventSubscriptionModel.api == self._api,
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def list_all(self) -> list[HubSubscription]:
        stmt = (
            select(EventSubscriptionModel)
            .where(EventSubscriptionModel.api == self._api)
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
