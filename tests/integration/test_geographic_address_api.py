"""Integration tests for the TMF673 Geographic Address endpoints."""

import asyncio

import pytest
from httpx import AsyncClient

API = "/tmf-api/geographicAddressManagement/v4"

ADDRESS = {
    "streetNr": "123",
    "streetName": "Main Street",
    "city": "Springfield",
    "country": "US",
    "geographicLocation": {"geometryType": "point", "geometry": [{"x": "1.5", "y": "2.5"}]},
    "geographicSubAddress": [
        {"subUnitType": "Apartment", "subUnitNumber": "101"},
        {"subUnitType": "Apartment", "subUnitNumber": "102"},
    ],
}


@pytest.mark.asyncio
async def test_create_address_with_sub_addresses(client: AsyncClient):
    response = await client.post(f"{API}/geographicAddress", json=ADDRESS)

    assert response.status_code == 201
    body = response.json()
    assert body["@type"] == "GeographicAddress"
    assert body["streetName"] == "Main Street"
    assert body["geographicLocation"] == ADDRESS["geographicLocation"]

    sub_addresses = body["geographicSubAddress"]
    assert sorted(s["subUnitNumber"] for s in sub_addresses) == ["101", "102"]
    for sub_address in sub_addresses:
        assert sub_address["@type"] == "GeographicSubAddress"
        assert sub_address["href"] == (
            f"http://testserver{API}/geographicAddress/{body['id']}"
            f"/geographicSubAddress/{sub_address['id']}"
        )


@pytest.mark.asyncio
async def test_sub_address_routes(client: AsyncClient):
    created = (await client.post(f"{API}/geographicAddress", json=ADDRESS)).json()
    base = f"{API}/geographicAddress/{created['id']}/geographicSubAddress"

    listed = await client.get(base)
    assert listed.status_code == 200
    assert len(listed.json()) == 2

    target = created["geographicSubAddress"][0]
    single = await client.get(f"{base}/{target['id']}")
    assert single.status_code == 200
    assert single.json() == target

    assert (await client.get(f"{base}/unknown")).status_code == 404
    missing_parent = await client.get(f"{API}/geographicAddress/unknown/geographicSubAddress")
    assert missing_parent.status_code == 404
    assert missing_parent.json()["code"] == "60"


@pytest.mark.asyncio
async def test_patch_replaces_sub_addresses(client: AsyncClient):
    created = (await client.post(f"{API}/geographicAddress", json=ADDRESS)).json()

    response = await client.patch(
        f"{API}/geographicAddress/{created['id']}",
        json={"postcode": "12345", "geographicSubAddress": [{"subUnitNumber": "201"}]},
    )

    body = response.json()
    assert body["postcode"] == "12345"
    assert body["city"] == "Springfield"
    assert [s["subUnitNumber"] for s in body["geographicSubAddress"]] == ["201"]


@pytest.mark.asyncio
async def test_delete_cascades_to_sub_addresses(client: AsyncClient):
    created = (await client.post(f"{API}/geographicAddress", json=ADDRESS)).json()

    assert (await client.delete(f"{API}/geographicAddress/{created['id']}")).status_code == 204
    listed = await client.get(
        f"{API}/geographicAddress/{created['id']}/geographicSubAddress"
    )
    assert listed.status_code == 404


@pytest.mark.asyncio
async def test_concurrent_creates_get_distinct_ids(client: AsyncClient):
    responses = await asyncio.gather(
        *(
            client.post(f"{API}/geographicAddress", json={"city": f"City {index}"})
            for index in range(5)
        )
    )

    assert all(response.status_code == 201 for response in responses)
    ids = {response.json()["id"] for response in responses}
    assert len(ids) == 5

    listed = await client.get(f"{API}/geographicAddress")
    assert listed.headers["X-Total-Count"] == "5"
