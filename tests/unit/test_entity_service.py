"""Unit tests for the generic EntityService and its concrete subclasses."""

from datetime import datetime, timezone
from types import SimpleNamespace
from typing import Any
from uuid import uuid4

import pytest

from tmf_api.application.interfaces import EntityRecord, EntityRepository, EventPublisher
from tmf_api.application.request_context import request_id_var
from tmf_api.application.schemas import (
    CatalogCreate,
    CatalogUpdate,
    CustomerCreate,
    CustomerUpdate,
    GeographicAddressCreate,
    IndividualCreate,
    IndividualUpdate,
)
from tmf_api.application.services import (
    CatalogService,
    CustomerService,
    GeographicAddressService,
    IndividualService,
    entity_service,
)
from tmf_api.domain.entities import PaginationParams
from tmf_api.domain.events import TMForumEvent

BASE_URL = "http://api.example.com"


class FakeRow(SimpleNamespace):
    """Row stand-in: unset columns read as None, like nullable ORM columns."""

    def __getattr__(self, name: str) -> Any:
        if name.startswith("__"):
            raise AttributeError(name)
        return None


class FakeEntityRepository(EntityRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self.rows: dict[str, FakeRow] = {}
        self.children: dict[str, dict[str, list[FakeRow]]] = {}

    async def add(self, values: dict[str, Any]) -> str:
        entity_id = str(uuid4())
        self.rows[entity_id] = FakeRow(id=entity_id, **values)
        self.children[entity_id] = {}
        return entity_id

    async def set_href(self, entity_id: str, href: str) -> None:
        self.rows[entity_id].href = href

    async def get(self, entity_id: str) -> EntityRecord | None:
        row = self.rows.get(entity_id)
        if row is None:
            return None
        children = {name: list(rows) for name, rows in self.children[entity_id].items()}
        return EntityRecord(row=row, children=children)

    async def get_all(self, *, offset: int, limit: int) -> list[EntityRecord]:
        ids = list(self.rows)[offset : offset + limit]
        return [await self.get(entity_id) for entity_id in ids]

    async def count(self) -> int:
        return len(self.rows)

    async def update(self, entity_id: str, values: dict[str, Any]) -> None:
        for name, value in values.items():
            setattr(self.rows[entity_id], name, value)

    async def delete(self, entity_id: str) -> bool:
        if entity_id in self.rows:
            del self.rows[entity_id]
            del self.children[entity_id]
            return True
        return False

    async def add_children(
        self, entity_id: str, collection: str, rows: list[dict[str, Any]]
    ) -> list[str]:
        created = [FakeRow(id=str(uuid4()), **values) for values in rows]
        self.children[entity_id].setdefault(collection, []).extend(created)
        return [row.id for row in created]

    async def delete_children(self, entity_id: str, collection: str) -> None:
        self.children[entity_id].pop(collection, None)

    async def set_child_href(self, collection: str, child_id: str, href: str) -> None:
        for collections in self.children.values():
            for row in collections.get(collection, []):
                if row.id == child_id:
                    row.href = href


class FakePublisher(EventPublisher):
    def __init__(self):
        self.events: list[TMForumEvent] = []

    async def publish(self, event: TMForumEvent) -> None:
        self.events.append(event)


@pytest.fixture
def repository() -> FakeEntityRepository:
    return FakeEntityRepository()


@pytest.fixture
def publisher() -> FakePublisher:
    return FakePublisher()


@pytest.fixture
def catalogs(repository, publisher) -> CatalogService:
    return CatalogService(repository, BASE_URL, publisher)


def _related_party(party_id: str = "p-1") -> dict[str, Any]:
    return {"id": party_id, "role": "owner", "@referredType": "Organization"}


# ── Create / read ────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_assigns_id_href_and_type(catalogs: CatalogService):
    dto = await catalogs.create(CatalogCreate(name="Consumer"))

    assert dto["id"]
    assert dto["href"] == (
        f"{BASE_URL}/tmf-api/productCatalogManagement/v4/catalog/{dto['id']}"
    )
    assert dto["@type"] == "Catalog"
    assert dto["name"] == "Consumer"
    assert dto["lastUpdate"].endswith("Z")


@pytest.mark.asyncio
async def test_create_omits_unset_optional_fields(catalogs: CatalogService):
    dto = await catalogs.create(CatalogCreate(name="Bare"))

    for key in ("description", "version", "validFor", "relatedParty", "category",
                "@baseType", "@schemaLocation"):
        assert key not in dto


@pytest.mark.asyncio
async def test_create_keeps_client_type_tags(catalogs: CatalogService):
    dto = await catalogs.create(
        CatalogCreate.model_validate(
            {"name": "X", "@type": "PartnerCatalog", "@baseType": "Catalog"}
        )
    )
    assert dto["@type"] == "PartnerCatalog"
    assert dto["@baseType"] == "Catalog"


@pytest.mark.asyncio
async def test_create_persists_children(catalogs: CatalogService):
    dto = await catalogs.create(
        CatalogCreate.model_validate(
            {"name": "X", "relatedParty": [_related_party("p-1"), _related_party("p-2")]}
        )
    )
    assert [party["id"] for party in dto["relatedParty"]] == ["p-1", "p-2"]
    assert dto["relatedParty"][0]["role"] == "owner"
    assert dto["relatedParty"][0]["@referredType"] == "Organization"


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(catalogs: CatalogService):
    assert await catalogs.find_by_id("does-not-exist") is None


@pytest.mark.asyncio
async def test_find_all_pages_and_counts(catalogs: CatalogService):
    for index in range(5):
        await catalogs.create(CatalogCreate(name=f"C{index}"))

    page = await catalogs.find_all(PaginationParams(offset=1, limit=2))

    assert page.total_count == 5
    assert [item["name"] for item in page.items] == ["C1", "C2"]


@pytest.mark.asyncio
async def test_find_all_past_the_end_is_empty(catalogs: CatalogService):
    await catalogs.create(CatalogCreate(name="Only"))

    page = await catalogs.find_all(PaginationParams(offset=10, limit=5))

    assert page.items == []
    assert page.total_count == 1


# ── Patch ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_patch_changes_only_present_fields(catalogs: CatalogService):
    created = await catalogs.create(
        CatalogCreate(name="Old", description="Keep me", version="1.0")
    )

    updated = await catalogs.update(created["id"], CatalogUpdate(name="New"))

    assert updated["name"] == "New"
    assert updated["description"] == "Keep me"
    assert updated["version"] == "1.0"


@pytest.mark.asyncio
async def test_patch_explicit_null_clears_field(catalogs: CatalogService):
    created = await catalogs.create(CatalogCreate(name="N", description="Gone soon"))

    updated = await catalogs.update(
        created["id"], CatalogUpdate.model_validate({"description": None})
    )

    assert "description" not in updated
    assert updated["name"] == "N"


@pytest.mark.asyncio
async def test_patch_advances_last_update_even_without_changes(
    catalogs: CatalogService, repository, monkeypatch
):
    created_at = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    patched_at = datetime(2024, 1, 1, 9, 0, 0, 1000, tzinfo=timezone.utc)
    monkeypatch.setattr(entity_service, "_utcnow", lambda: created_at)
    created = await catalogs.create(CatalogCreate(name="Stamped"))
    assert created["lastUpdate"] == "2024-01-01T09:00:00.000Z"

    monkeypatch.setattr(entity_service, "_utcnow", lambda: patched_at)
    updated = await catalogs.update(created["id"], CatalogUpdate())

    assert updated["lastUpdate"] == "2024-01-01T09:00:00.001Z"
    assert updated["name"] == "Stamped"
    row = repository.rows[created["id"]]
    assert row.last_update == patched_at
    assert row.updated_at == patched_at


@pytest.mark.asyncio
async def test_patch_stamps_updated_at_on_entities_without_last_update(repository, monkeypatch):
    customers = CustomerService(repository, BASE_URL)
    created = await customers.create(
        CustomerCreate.model_validate(
            {"engagedParty": {"id": "o-1", "@referredType": "Organization"}}
        )
    )
    patched_at = datetime(2030, 6, 1, tzinfo=timezone.utc)
    monkeypatch.setattr(entity_service, "_utcnow", lambda: patched_at)

    await customers.update(created["id"], CustomerUpdate())

    row = repository.rows[created["id"]]
    assert row.updated_at == patched_at
    assert row.last_update is None


@pytest.mark.asyncio
async def test_patch_does_not_change_id_or_href(catalogs: CatalogService):
    created = await catalogs.create(CatalogCreate(name="N"))
    updated = await catalogs.update(created["id"], CatalogUpdate(name="M"))

    assert updated["id"] == created["id"]
    assert updated["href"] == created["href"]


@pytest.mark.asyncio
async def test_patch_replaces_child_collection(catalogs: CatalogService):
    created = await catalogs.create(
        CatalogCreate.model_validate({"relatedParty": [_related_party("p-1")]})
    )

    updated = await catalogs.update(
        created["id"],
        CatalogUpdate.model_validate(
            {"relatedParty": [_related_party("p-2"), _related_party("p-3")]}
        ),
    )

    assert [party["id"] for party in updated["relatedParty"]] == ["p-2", "p-3"]


@pytest.mark.asyncio
async def test_patch_absent_child_key_keeps_collection(catalogs: CatalogService):
    created = await catalogs.create(
        CatalogCreate.model_validate({"relatedParty": [_related_party("p-1")]})
    )

    updated = await catalogs.update(created["id"], CatalogUpdate(name="Renamed"))

    assert [party["id"] for party in updated["relatedParty"]] == ["p-1"]


@pytest.mark.asyncio
async def test_patch_empty_child_list_clears_collection(catalogs: CatalogService):
    created = await catalogs.create(
        CatalogCreate.model_validate({"relatedParty": [_related_party("p-1")]})
    )

    updated = await catalogs.update(
        created["id"], CatalogUpdate.model_validate({"relatedParty": []})
    )

    assert "relatedParty" not in updated


@pytest.mark.asyncio
async def test_patch_missing_entity_returns_none(catalogs: CatalogService, publisher):
    assert await catalogs.update("nope", CatalogUpdate(name="X")) is None
    assert publisher.events == []


@pytest.mark.asyncio
async def test_patch_valid_for_replaces_both_bounds(catalogs: CatalogService):
    created = await catalogs.create(
        CatalogCreate.model_validate(
            {"validFor": {"startDateTime": "2024-01-01T00:00:00Z",
                          "endDateTime": "2024-12-31T00:00:00Z"}}
        )
    )

    updated = await catalogs.update(
        created["id"],
        CatalogUpdate.model_validate({"validFor": {"startDateTime": "2025-01-01T00:00:00Z"}}),
    )

    assert updated["validFor"] == {"startDateTime": "2025-01-01T00:00:00.000Z"}


# ── Delete ───────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_delete_removes_entity(catalogs: CatalogService):
    created = await catalogs.create(CatalogCreate(name="Temp"))

    assert await catalogs.delete(created["id"]) is True
    assert await catalogs.find_by_id(created["id"]) is None
    assert await catalogs.delete(created["id"]) is False


# ── Events ───────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_lifecycle_publishes_events(catalogs: CatalogService, publisher):
    created = await catalogs.create(CatalogCreate(name="E"))
    await catalogs.update(created["id"], CatalogUpdate(name="F"))
    await catalogs.delete(created["id"])

    assert [event.event_type for event in publisher.events] == [
        "CatalogCreateEvent",
        "CatalogAttributeValueChangeEvent",
        "CatalogDeleteEvent",
    ]
    create_event = publisher.events[0]
    assert create_event.domain == "productCatalogManagement"
    assert create_event.event == {"catalog": created}
    assert publisher.events[1].event["catalog"]["name"] == "F"


@pytest.mark.asyncio
async def test_event_carries_request_correlation_id(catalogs: CatalogService, publisher):
    token = request_id_var.set("req-42")
    try:
        await catalogs.create(CatalogCreate(name="Correlated"))
    finally:
        request_id_var.reset(token)

    payload = publisher.events[0].to_dict()
    assert payload["correlationId"] == "req-42"
    assert payload["eventType"] == "CatalogCreateEvent"
    assert payload["eventTime"].endswith("Z")


@pytest.mark.asyncio
async def test_service_without_publisher(repository):
    service = CatalogService(repository, BASE_URL)
    dto = await service.create(CatalogCreate(name="Quiet"))
    assert await service.delete(dto["id"]) is True


# ── Entity specifics ─────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_customer_engaged_party_survives_null_patch(repository):
    service = CustomerService(repository, BASE_URL)
    created = await service.create(
        CustomerCreate.model_validate(
            {"name": "Acme", "engagedParty": {"id": "org-1", "@referredType": "Organization"}}
        )
    )

    updated = await service.update(
        created["id"], CustomerUpdate.model_validate({"engagedParty": None, "status": "Approved"})
    )

    assert updated["engagedParty"] == {"id": "org-1", "@referredType": "Organization"}
    assert updated["status"] == "Approved"
    assert "lastUpdate" not in updated


@pytest.mark.asyncio
async def test_individual_defaults_and_dates(repository):
    service = IndividualService(repository, BASE_URL)
    dto = await service.create(
        IndividualCreate.model_validate({"givenName": "Jane", "birthDate": "1990-05-17"})
    )

    assert dto["@type"] == "Individual"
    assert dto["@baseType"] == "Party"
    assert dto["birthDate"] == "1990-05-17"
    assert dto["href"].endswith(f"/tmf-api/partyManagement/v4/individual/{dto['id']}")

    updated = await service.update(dto["id"], IndividualUpdate(family_name="Doe"))
    assert updated["givenName"] == "Jane"
    assert updated["familyName"] == "Doe"


@pytest.mark.asyncio
async def test_sub_addresses_get_nested_hrefs(repository):
    service = GeographicAddressService(repository, BASE_URL)
    dto = await service.create(
        GeographicAddressCreate.model_validate(
            {
                "city": "Springfield",
                "geographicSubAddress": [{"subUnitNumber": "101"}, {"subUnitNumber": "102"}],
            }
        )
    )

    sub_addresses = dto["geographicSubAddress"]
    assert len(sub_addresses) == 2
    for sub_address in sub_addresses:
        assert sub_address["@type"] == "GeographicSubAddress"
        assert sub_address["href"] == (
            f"{BASE_URL}/tmf-api/geographicAddressManagement/v4/geographicAddress/"
            f"{dto['id']}/geographicSubAddress/{sub_address['id']}"
        )

    listed = await service.list_sub_addresses(dto["id"])
    assert [item["subUnitNumber"] for item in listed] == ["101", "102"]

    found = await service.find_sub_address(dto["id"], sub_addresses[1]["id"])
    assert found["subUnitNumber"] == "102"
    assert await service.find_sub_address(dto["id"], "unknown") is None
    assert await service.list_sub_addresses("unknown") is None
