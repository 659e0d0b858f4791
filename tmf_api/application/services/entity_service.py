"""Generic CRUD use case shared by every TMF entity.

A concrete service names its API family, entity and resource path, maps
request models to column values, and renders records as wire DTOs. Child
collections are declared in ``child_builders``: the key is both the request
attribute and the repository collection name, the value turns request
items into child rows.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel

from tmf_api.application.interfaces import EntityRecord, EntityRepository, EventPublisher
from tmf_api.application.request_context import current_request_id
from tmf_api.application.transforms.common import patch_values, valid_for_patch
from tmf_api.domain.apis import TMFApi
from tmf_api.domain.entities import Page, PaginationParams
from tmf_api.domain.events import TMForumEvent
from tmf_api.domain.exceptions import InternalServerError

logger = logging.getLogger(__name__)

ChildBuilder = Callable[[list[Any]], list[dict[str, Any]]]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityService:
    """Orchestrates create / read / list / patch / delete for one entity.

    Depends on the repository port and an optional event publisher (DI).
    Absence is reported as ``None`` / ``False``; routes decide on 404s.
    """

    api: TMFApi
    entity_name: str
    resource_path: str
    tracks_last_update: bool = False
    patch_fields: tuple[str, ...] = ()
    child_builders: dict[str, ChildBuilder] = {}

    def __init__(
        self,
        repository: EntityRepository,
        base_url: str,
        publisher: EventPublisher | None = None,
    ):
        self._repository = repository
        self._base_url = base_url
        self._publisher = publisher

    # ── Hooks ───────────────────────────────────────────────────────────────

    def _create_values(self, data: BaseModel) -> dict[str, Any]:
        raise NotImplementedError

    def _update_values(self, data: BaseModel) -> dict[str, Any]:
        return {**patch_values(data, self.patch_fields), **valid_for_patch(data)}

    def _to_dto(self, record: EntityRecord) -> dict[str, Any]:
        raise NotImplementedError

    def _child_href(self, collection: str, parent_id: str, child_id: str) -> str | None:
        """Self-link for child rows that are resources in their own right."""
        return None

    # ── Use cases ───────────────────────────────────────────────────────────

    @property
    def entity_key(self) -> str:
        return self.entity_name[0].lower() + self.entity_name[1:]

    def href_for(self, entity_id: str) -> str:
        return self.api.href(self._base_url, self.resource_path, entity_id)

    async def create(self, data: BaseModel) -> dict[str, Any]:
        values = self._create_values(data)
        if self.tracks_last_update:
            values["last_update"] = _utcnow()

        entity_id = await self._repository.add(values)
        await self._repository.set_href(entity_id, self.href_for(entity_id))
        for collection in self.child_builders:
            items = getattr(data, collection)
            if items:
                await self._add_children(entity_id, collection, items)

        dto = await self.find_by_id(entity_id)
        if dto is None:
            raise InternalServerError(
                f"{self.entity_name} {entity_id} could not be read back after create"
            )
        logger.info("Created %s %s", self.entity_name, entity_id)
        await self._publish("CreateEvent", dto)
        return dto

    async def find_by_id(self, entity_id: str) -> dict[str, Any] | None:
        record = await self._repository.get(entity_id)
        if record is None:
            return None
        return self._to_dto(record)

    async def find_all(self, pagination: PaginationParams) -> Page:
        total_count = await self._repository.count()
        records = await self._repository.get_all(
            offset=pagination.offset, limit=pagination.limit
        )
        return Page(
            items=[self._to_dto(record) for record in records],
            total_count=total_count,
        )

    async def update(self, entity_id: str, data: BaseModel) -> dict[str, Any] | None:
        if await self._repository.get(entity_id) is None:
            return None

        now = _utcnow()
        values = self._update_values(data)
        values["updated_at"] = now
        if self.tracks_last_update:
            values["last_update"] = now
        await self._repository.update(entity_id, values)

        # A present key replaces the whole collection, even with []
        for collection in self.child_builders:
            if collection not in data.model_fields_set:
                continue
            items = getattr(data, collection)
            if items is None:
                continue
            await self._repository.delete_children(entity_id, collection)
            if items:
                await self._add_children(entity_id, collection, items)

        dto = await self.find_by_id(entity_id)
        if dto is None:
            return None
        await self._publish("AttributeValueChangeEvent", dto)
        return dto

    async def delete(self, entity_id: str) -> bool:
        record = await self._repository.get(entity_id)
        if record is None:
            return False
        dto = self._to_dto(record)
        deleted = await self._repository.delete(entity_id)
        if deleted:
            logger.info("Deleted %s %s", self.entity_name, entity_id)
            await self._publish("DeleteEvent", dto)
        return deleted

    # ── Internals ───────────────────────────────────────────────────────────

    async def _add_children(
        self, entity_id: str, collection: str, items: list[Any]
    ) -> None:
        rows = self.child_builders[collection](items)
        child_ids = await self._repository.add_children(entity_id, collection, rows)
        for child_id in child_ids:
            href = self._child_href(collection, entity_id, child_id)
            if href is not None:
                await self._repository.set_child_href(collection, child_id, href)

    async def _publish(self, kind: str, dto: dict[str, Any]) -> None:
        if self._publisher is None:
            return
        event = TMForumEvent(
            event_type=f"{self.entity_name}{kind}",
            domain=self.api.name,
            title=f"{self.entity_name} {kind}",
            description=f"{self.entity_name} {dto['id']} {kind}",
            event={self.entity_key: dto},
            correlation_id=current_request_id(),
        )
        await self._publisher.publish(event)
