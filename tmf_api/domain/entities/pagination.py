"""Pagination value objects shared by every list operation."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


@dataclass(frozen=True)
class PaginationParams:
    """Offset/limit window requested by the caller, already clamped."""

    offset: int = 0
    limit: int = DEFAULT_LIMIT


@dataclass
class Page:
    """One page of DTOs plus the unfiltered total row count."""

    items: list[dict[str, Any]] = field(default_factory=list)
    total_count: int = 0
