"""Records: CRUD with format/price/genre defaults."""

from decimal import Decimal
from uuid import uuid4

import pytest

from records.service import combine_genres


async def test_create_record_applies_defaults(client, record_payload):
    res = await client.post("/api/records", json=record_payload)

    assert res.status_code == 201
    record = res.json()["record"]
    assert record["format"] == "LP"
    assert Decimal(str(record["price"])) == 0
    assert record["genre"] == ["Jazz", "Modal"]
    assert record["duration_length"] == "00:45:44"
    assert record["released"] == "1959-08-17"


async def test_create_record_keeps_supplied_format_and_price(client, record_payload):
    res = await client.post("/api/records", json={**record_payload, "format": "CD", "price": "24.99"})

    record = res.json()["record"]
    assert record["format"] == "CD"
    assert Decimal(str(record["price"])) == Decimal("24.99")


async def test_record_without_genre_gets_empty_list(client, record_payload):
    payload = dict(record_payload)
    del payload["genre"]

    res = await client.post("/api/records", json=payload)

    assert res.json()["record"]["genre"] == []


@pytest.mark.parametrize(
    ("supplied", "expected"),
    [
        (None, []),
        (["Jazz"], ["Jazz"]),
        (["Jazz", " jazz ", "Jazz", ""], ["Jazz", "jazz"]),
        (["  Rock ", "Pop", "Rock"], ["Rock", "Pop"]),
    ],
)
def test_combine_genres(supplied, expected):
    assert combine_genres(supplied) == expected


async def test_invalid_release_date_is_bad_request(client, record_payload):
    res = await client.post("/api/records", json={**record_payload, "released": "someday"})

    assert res.status_code == 400
    assert "released" in res.json()["message"]


async def test_get_update_delete_record(client, record_payload):
    created = (await client.post("/api/records", json=record_payload)).json()["record"]
    url = f"/api/records/{created['record_id']}"

    assert (await client.get(url)).json()["record"] == created

    patched = await client.patch(url, json={"price": "30", "genre": ["Jazz"]})
    assert patched.status_code == 200
    assert Decimal(str(patched.json()["record"]["price"])) == 30
    assert patched.json()["record"]["genre"] == ["Jazz"]
    assert patched.json()["record"]["title"] == created["title"]
    assert patched.json()["record"]["record_id"] == created["record_id"]

    assert (await client.delete(url)).status_code == 204
    assert (await client.get(url)).status_code == 404


async def test_blank_format_is_stored_as_default(client, store, record_payload):
    created = (await client.post("/api/records", json={**record_payload, "format": "CD"})).json()["record"]

    res = await client.patch(f"/api/records/{created['record_id']}", json={"format": ""})

    assert res.json()["record"]["format"] == "LP"
    assert [row["format"] for row in store.records.values()] == ["LP"]


async def test_create_with_blank_format_stores_default(client, store, record_payload):
    await client.post("/api/records", json={**record_payload, "format": ""})

    assert [row["format"] for row in store.records.values()] == ["LP"]


async def test_empty_patch_leaves_record_unchanged(client, record_payload):
    created = (await client.post("/api/records", json=record_payload)).json()["record"]

    res = await client.patch(f"/api/records/{created['record_id']}", json={})

    assert res.json()["record"] == created


@pytest.mark.parametrize("method", ["get", "patch", "delete"])
async def test_unknown_record_returns_404_with_id(client, method):
    missing = str(uuid4())
    kwargs = {"json": {"title": "x"}} if method == "patch" else {}

    res = await getattr(client, method)(f"/api/records/{missing}", **kwargs)

    assert res.status_code == 404
    assert missing in res.json()["message"]


async def test_list_records_orders_by_artist(client, record_payload):
    for artist in ("Nina Simone", "Coltrane", "Bill Evans"):
        await client.post("/api/records", json={**record_payload, "artist": artist})

    body = (await client.get("/api/records")).json()

    assert [r["artist"] for r in body["records"]] == ["Bill Evans", "Coltrane", "Nina Simone"]
