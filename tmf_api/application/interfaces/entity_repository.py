"""Abstract repository interface (port) for TMF entity persistence."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class EntityRecord:
    """A parent row plus its child rows, keyed by collection name.

    Rows are whatever the persistence layer returns (ORM instances in
    production, simple namespaces in tests); transforms only read attributes.
    """

    row: Any
    children: dict[str, list[Any]] = field(default_factory=dict)


class EntityRepository(ABC):
    """Port for one entity table and its owned child collections."""

    @abstractmethod
    async def add(self, values: dict[str, Any]) -> str:
        """Insert a parent row and return its generated id."""
        ...

    @abstractmethod
    async def set_href(self, entity_id: str, href: str) -> None:
        """Persist the self-link onto an already inserted row."""
        ...

    @abstractmethod
    async def get(self, entity_id: str) -> EntityRecord | None:
        """Fetch one row with all of its child collections."""
        ...

    @abstractmethod
    async def get_all(self, *, offset: int, limit: int) -> list[EntityRecord]:
        """Fetch a window of rows, each with its child collections."""
        ...

    @abstractmethod
    async def count(self) -> int:
        """Exact number of rows, ignoring pagination."""
        ...

    @abstractmethod
    async def update(self, entity_id: str, values: dict[str, Any]) -> None:
        """Apply a column → value update set to one row."""
        ...

    @abstractmethod
    async def delete(self, entity_id: str) -> bool:
        """Delete a row (children cascade). Returns True if a row was removed."""
        ...

    @abstractmethod
    async def add_children(
        self, entity_id: str, collection: str, rows: list[dict[str, Any]]
    ) -> list[str]:
        """Insert child rows tagged with the parent id; returns the child ids."""
        ...

    @abstractmethod
    async def delete_children(self, entity_id: str, collection: str) -> None:
        """Remove every child row of one collection."""
        ...

    @abstractmethod
    async def set_child_href(self, collection: str, child_id: str, href: str) -> None:
        """Persist the self-link of a child row that has one."""
        ...
