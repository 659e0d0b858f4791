"""Row ↔ wire helpers shared by every entity transform.

Everything here is pure: rows are read through attribute access and
request models through their pydantic fields, nothing touches the database.
Wire keys are derived from column names with the same camelCase rule the
request schemas use, so a column ``status_reason`` is always ``statusReason``.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone
from typing import Any

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from tmf_api.application.schemas.common import (
    Characteristic,
    ContactMedium,
    RelatedPartyRef,
    TimePeriod,
    TypedModel,
)


# ── Row → wire ───────────────────────────────────────────────────────────────

def to_iso(value: datetime | None) -> str | None:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if value is None:
        return None
    if value.tzinfo is None:
        # SQLite hands back naive datetimes; everything is stored as UTC.
        value = value.replace(tzinfo=timezone.utc)
    return (
        value.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def wire_value(value: Any) -> Any:
    if isinstance(value, datetime):
        return to_iso(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


def put(dto: dict[str, Any], key: str, value: Any) -> None:
    """Set ``key`` only when ``value`` is not None."""
    if value is not None:
        dto[key] = wire_value(value)


def put_fields(dto: dict[str, Any], row: Any, fields: Iterable[str]) -> None:
    for name in fields:
        put(dto, to_camel(name), getattr(row, name))


def put_valid_for(dto: dict[str, Any], row: Any) -> None:
    """Emit ``validFor`` only when at least one bound is stored."""
    valid_for: dict[str, Any] = {}
    put(valid_for, "startDateTime", row.valid_for_start)
    put(valid_for, "endDateTime", row.valid_for_end)
    if valid_for:
        dto["validFor"] = valid_for


def put_list(
    dto: dict[str, Any],
    key: str,
    rows: list[Any] | None,
    render: Callable[[Any], dict[str, Any]],
) -> None:
    """Emit a child array only when it has elements."""
    if rows:
        dto[key] = [render(row) for row in rows]


def base_dto(row: Any) -> dict[str, Any]:
    """``id``, ``href`` and ``@type`` always; the other tags when stored."""
    dto: dict[str, Any] = {"id": row.id, "href": row.href, "@type": row.type}
    put(dto, "@baseType", row.base_type)
    put(dto, "@schemaLocation", row.schema_location)
    return dto


def render_related_party(row: Any) -> dict[str, Any]:
    dto: dict[str, Any] = {"id": row.referenced_party_id}
    put(dto, "href", row.referenced_party_href)
    put(dto, "name", row.name)
    put(dto, "role", row.role)
    put(dto, "@referredType", row.referred_type)
    return dto


def render_characteristic(row: Any) -> dict[str, Any]:
    dto: dict[str, Any] = {"id": row.id}
    put_fields(dto, row, ("name", "value", "value_type"))
    return dto


def render_contact_medium(row: Any) -> dict[str, Any]:
    dto: dict[str, Any] = {"id": row.id}
    put_fields(dto, row, ("medium_type", "preferred", "characteristic"))
    put_valid_for(dto, row)
    return dto


# ── Request → row ────────────────────────────────────────────────────────────

def scalar_values(data: BaseModel, fields: Iterable[str]) -> dict[str, Any]:
    """Provided (non-null) fields only, so column defaults apply to the rest."""
    values: dict[str, Any] = {}
    for name in fields:
        value = getattr(data, name)
        if value is not None:
            values[name] = value
    return values


def patch_values(data: BaseModel, fields: Iterable[str]) -> dict[str, Any]:
    """Fields explicitly present in the request, explicit nulls included."""
    return {
        name: getattr(data, name)
        for name in fields
        if name in data.model_fields_set
    }


def type_tag_values(
    data: TypedModel, default_type: str, default_base_type: str | None = None
) -> dict[str, Any]:
    return {
        "type": data.type or default_type,
        "base_type": data.base_type or default_base_type,
        "schema_location": data.schema_location,
    }


def to_utc(value: datetime | None) -> datetime | None:
    """Normalize request timestamps to aware UTC; naive input is taken as UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def valid_for_values(period: TimePeriod | None) -> dict[str, Any]:
    if period is None:
        return {"valid_for_start": None, "valid_for_end": None}
    return {
        "valid_for_start": to_utc(period.start_date_time),
        "valid_for_end": to_utc(period.end_date_time),
    }


def valid_for_patch(data: BaseModel) -> dict[str, Any]:
    """``validFor`` replaces both bounds when present; absent leaves them."""
    if "valid_for" not in data.model_fields_set:
        return {}
    return valid_for_values(data.valid_for)


def related_party_rows(items: list[RelatedPartyRef]) -> list[dict[str, Any]]:
    return [
        {
            "referenced_party_id": item.id,
            "referenced_party_href": item.href,
            "name": item.name,
            "role": item.role,
            "referred_type": item.referred_type,
        }
        for item in items
    ]


def characteristic_rows(items: list[Characteristic]) -> list[dict[str, Any]]:
    return [
        {"name": item.name, "value": item.value, "value_type": item.value_type}
        for item in items
    ]


def contact_medium_rows(items: list[ContactMedium]) -> list[dict[str, Any]]:
    rows = []
    for item in items:
        characteristic = None
        if item.characteristic is not None:
            characteristic = item.characteristic.model_dump(
                by_alias=True, exclude_none=True
            )
        rows.append(
            {
                "medium_type": item.medium_type,
                "preferred": bool(item.preferred),
                "characteristic": characteristic,
                **valid_for_values(item.valid_for),
            }
        )
    return rows
