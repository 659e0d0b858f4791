"""Generic SQLAlchemy implementation of the entity repository port.

Concrete repositories declare the parent ``model``, their owned ``children``
tables and, for tables shared by several entity kinds, a ``discriminator``
column/value pair that scopes every statement.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tmf_api.application.interfaces import EntityRecord, EntityRepository


@dataclass(frozen=True)
class ChildTable:
    """An owned child table and the column pointing back at the parent."""

    model: type
    foreign_key: str


class SQLAlchemyEntityRepository(EntityRepository):
    """Implements the EntityRepository port using SQLAlchemy async sessions."""

    model: type
    children: dict[str, ChildTable] = {}
    discriminator: tuple[str, str] | None = None

    def __init__(self, session: AsyncSession):
        self._session = session

    def _scope(self, stmt):
        if self.discriminator is not None:
            column, value = self.discriminator
            stmt = stmt.where(getattr(self.model, column) == value)
        return stmt

    def _select(self):
        # Bulk UPDATE/DELETE bypass the identity map; always refresh on read
        stmt = select(self.model).execution_options(populate_existing=True)
        return self._scope(stmt)

    async def _load_children(self, parent_ids: list[str]) -> dict[str, dict[str, list[Any]]]:
        """collection → parent id → child rows, one query per collection."""
        loaded: dict[str, dict[str, list[Any]]] = {}
        for collection, table in self.children.items():
            foreign_key = getattr(table.model, table.foreign_key)
            stmt = (
                select(table.model)
                .where(foreign_key.in_(parent_ids))
                .execution_options(populate_existing=True)
            )
            if hasattr(table.model, "created_at"):
                stmt = stmt.order_by(table.model.created_at, table.model.id)
            result = await self._session.execute(stmt)
            grouped: dict[str, list[Any]] = defaultdict(list)
            for child in result.scalars().all():
                grouped[getattr(child, table.foreign_key)].append(child)
            loaded[collection] = grouped
        return loaded

    async def _to_records(self, rows: list[Any]) -> list[EntityRecord]:
        if not rows:
            return []
        loaded = await self._load_children([row.id for row in rows])
        return [
            EntityRecord(
                row=row,
                children={
                    collection: list(by_parent.get(row.id, []))
                    for collection, by_parent in loaded.items()
                },
            )
            for row in rows
        ]

    async def add(self, values: dict[str, Any]) -> str:
        if self.discriminator is not None:
            column, value = self.discriminator
            values = {**values, column: value}
        row = self.model(**values)
        self._session.add(row)
        await self._session.flush()
        return row.id

    async def set_href(self, entity_id: str, href: str) -> None:
        await self.update(entity_id, {"href": href})

    async def get(self, entity_id: str) -> EntityRecord | None:
        result = await self._session.execute(
            self._select().where(self.model.id == entity_id)
        )
        row = result.scalar_one_or_none()
        if row is None:
            return None
        records = await self._to_records([row])
        return records[0]

    async def get_all(self, *, offset: int, limit: int) -> list[EntityRecord]:
        stmt = (
            self._select()
            .order_by(self.model.created_at, self.model.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return await self._to_records(list(result.scalars().all()))

    async def count(self) -> int:
        stmt = self._scope(select(func.count()).select_from(self.model))
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def update(self, entity_id: str, values: dict[str, Any]) -> None:
        stmt = self._scope(
            update(self.model).where(self.model.id == entity_id).values(**values)
        )
        await self._session.execute(stmt)

    async def delete(self, entity_id: str) -> bool:
        stmt = self._scope(delete(self.model).where(self.model.id == entity_id))
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def add_children(
        self, entity_id: str, collection: str, rows: list[dict[str, Any]]
    ) -> list[str]:
        table = self.children[collection]
        models = [table.model(**{**row, table.foreign_key: entity_id}) for row in rows]
        self._session.add_all(models)
        await self._session.flush()
        return [model.id for model in models]

    async def delete_children(self, entity_id: str, collection: str) -> None:
        table = self.children[collection]
        await self._session.execute(
            delete(table.model).where(getattr(table.model, table.foreign_key) == entity_id)
        )

    async def set_child_href(self, collection: str, child_id: str, href: str) -> None:
        table = self.children[collection]
        await self._session.execute(
            update(table.model).where(table.model.id == child_id).values(href=href)
        )
