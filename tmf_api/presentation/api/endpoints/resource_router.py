"""Generic TMF resource endpoints: POST, GET by id, GET list, PATCH, DELETE.

Each resource gets its own router built from its request schemas and a
service dependency; request bodies are declared with the concrete schema so
they are validated and documented per resource.
"""

from collections.abc import Callable
from typing import Any

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from tmf_api.application.schemas import ErrorResponse
from tmf_api.application.services import EntityService
from tmf_api.domain.entities import PaginationParams
from tmf_api.domain.exceptions import NotFoundError
from tmf_api.infrastructure.dependencies import get_pagination

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def build_resource_router(
    *,
    resource_path: str,
    entity_name: str,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    get_service: Callable[..., Any],
    tag: str,
) -> APIRouter:
    router = APIRouter(prefix=f"/{resource_path}", tags=[tag], responses=ERROR_RESPONSES)

    @router.post("", status_code=status.HTTP_201_CREATED)
    async def create_entity(
        data: create_schema,  # type: ignore[valid-type]
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        return await service.create(data)

    @router.get("/{entity_id}")
    async def get_entity(
        entity_id: str,
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        dto = await service.find_by_id(entity_id)
        if dto is None:
            raise NotFoundError(entity_name, entity_id)
        return dto

    @router.get("")
    async def list_entities(
        response: Response,
        pagination: PaginationParams = Depends(get_pagination),
        service: EntityService = Depends(get_service),
    ) -> list[dict[str, Any]]:
        page = await service.find_all(pagination)
        response.headers["X-Total-Count"] = str(page.total_count)
        response.headers["X-Result-Count"] = str(len(page.items))
        return page.items

    @router.patch("/{entity_id}")
    async def update_entity(
        entity_id: str,
        data: update_schema,  # type: ignore[valid-type]
        service: EntityService = Depends(get_service),
    ) -> dict[str, Any]:
        dto = await service.update(entity_id, data)
        if dto is None:
            raise NotFoundError(entity_name, entity_id)
        return dto

    @router.delete("/{entity_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_entity(
        entity_id: str,
        service: EntityService = Depends(get_service),
    ) -> Response:
        if not await service.delete(entity_id):
            raise NotFoundError(entity_name, entity_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
