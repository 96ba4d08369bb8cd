"""Users: CRUD with password hashing and public-shape mapping.

Invariants:
    - The password (plain or hashed) never appears in any response
    - Password is hashed on create; on update only when a new one is supplied
    - Duplicate user_name / user_email → 409
    - Missing user on update/delete → 404 "user id: {id} not found"
"""

from uuid import uuid4

import bcrypt
import pytest

import users.repository as users_repository
from fakes import as_uuid, unique_violation


def _matches(plain, stored_hash):
    return bcrypt.checkpw(plain.encode("utf-8"), stored_hash.encode("utf-8"))


async def test_create_user_hides_password(client, store, user_payload):
    res = await client.post("/api/users", json=user_payload)

    assert res.status_code == 201
    user = res.json()["user"]
    assert "user_password" not in user
    assert user["user_name"] == "crate_digger"

    stored = store.users[as_uuid(user["user_id"])]
    assert stored["user_password"] != user_payload["user_password"]
    assert _matches(user_payload["user_password"], stored["user_password"])


async def test_duplicate_user_name_returns_409(client, user, user_payload):
    res = await client.post("/api/users", json={**user_payload, "user_email": "other@example.com"})

    assert res.status_code == 409
    assert res.json()["message"] == "user_name crate_digger already exists"


async def test_duplicate_email_returns_409(client, user, user_payload):
    res = await client.post("/api/users", json={**user_payload, "user_name": "someone_else"})

    assert res.status_code == 409
    assert res.json()["message"] == "user_email sam@example.com already exists"


@pytest.mark.parametrize(
    ("constraint", "message"),
    [
        ("users_user_name_key", "user_name crate_digger already exists"),
        ("users_user_email_lower_key", "user_email sam@example.com already exists"),
    ],
)
async def test_insert_time_unique_violation_names_the_field(client, user_payload, monkeypatch, constraint, message):
    async def racing_create(db, **fields):
        raise unique_violation(constraint)

    monkeypatch.setattr(users_repository, "create_user", racing_create)

    res = await client.post("/api/users", json=user_payload)

    assert res.status_code == 409
    assert res.json()["message"] == message


async def test_missing_required_field_is_bad_request(client, user_payload):
    payload = dict(user_payload)
    del payload["user_email"]

    res = await client.post("/api/users", json=payload)

    assert res.status_code == 400
    assert "user_email" in res.json()["message"]


async def test_find_user(client, user):
    res = await client.get(f"/api/users/{user['user_id']}")

    assert res.status_code == 200
    assert res.json() == {"status": "success", "user": user}


async def test_find_missing_user_returns_404(client):
    missing = uuid4()
    res = await client.get(f"/api/users/{missing}")

    assert res.status_code == 404
    assert res.json()["message"] == f"user_id {missing} not found"


async def test_update_without_password_keeps_hash(client, store, user):
    before = store.users[as_uuid(user["user_id"])]["user_password"]

    res = await client.patch(f"/api/users/{user['user_id']}", json={"user_first_name": "Samantha"})

    assert res.status_code == 200
    assert res.json()["user"]["user_first_name"] == "Samantha"
    assert "user_password" not in res.json()["user"]
    assert store.users[as_uuid(user["user_id"])]["user_password"] == before


async def test_update_with_password_rehashes(client, store, user):
    res = await client.patch(f"/api/users/{user['user_id']}", json={"user_password": "new secret"})

    assert res.status_code == 200
    stored = store.users[as_uuid(user["user_id"])]["user_password"]
    assert _matches("new secret", stored)
    assert not _matches("correct horse battery", stored)


async def test_empty_patch_leaves_user_unchanged(client, store, user):
    before = dict(store.users[as_uuid(user["user_id"])])

    res = await client.patch(f"/api/users/{user['user_id']}", json={})

    assert res.status_code == 200
    assert res.json()["user"] == user
    assert store.users[as_uuid(user["user_id"])] == before


async def test_update_missing_user_returns_404(client):
    missing = uuid4()
    res = await client.patch(f"/api/users/{missing}", json={"user_first_name": "X"})

    assert res.status_code == 404
    assert res.json()["message"] == f"user id: {missing} not found"


async def test_delete_missing_user_returns_404(client):
    missing = uuid4()
    res = await client.delete(f"/api/users/{missing}")

    assert res.status_code == 404
    assert res.json() == {"status": "fail", "message": f"user id: {missing} not found"}


async def test_delete_user_twice(client, user):
    first = await client.delete(f"/api/users/{user['user_id']}")
    second = await client.delete(f"/api/users/{user['user_id']}")

    assert first.status_code == 204
    assert second.status_code == 404


async def test_list_users_defaults_to_five(client, user_payload):
    for i in range(6):
        await client.post(
            "/api/users",
            json={**user_payload, "user_name": f"user{i}", "user_email": f"user{i}@example.com"},
        )

    body = (await client.get("/api/users")).json()

    assert body["results"] == 5
    assert [u["user_name"] for u in body["users"]] == [f"user{i}" for i in range(5)]
    assert all("user_password" not in u for u in body["users"])


async def test_password_over_bcrypt_limit_is_bad_request(client, store, user_payload):
    res = await client.post("/api/users", json={**user_payload, "user_password": "x" * 100})

    assert res.status_code == 400
    assert res.json()["status"] == "fail"
    assert "user_password" in res.json()["message"]
    assert store.users == {}


async def test_multibyte_password_counts_bytes(client, user_payload):
    # 40 characters, 80 bytes in UTF-8.
    res = await client.post("/api/users", json={**user_payload, "user_password": "é" * 40})

    assert res.status_code == 400


async def test_patch_password_over_bcrypt_limit_is_bad_request(client, store, user):
    before = store.users[as_uuid(user["user_id"])]["user_password"]

    res = await client.patch(f"/api/users/{user['user_id']}", json={"user_password": "x" * 73})

    assert res.status_code == 400
    assert res.json()["status"] == "fail"
    assert store.users[as_uuid(user["user_id"])]["user_password"] == before


async def test_password_at_bcrypt_limit_is_accepted(client, store, user_payload):
    res = await client.post("/api/users", json={**user_payload, "user_password": "x" * 72})

    assert res.status_code == 201
    assert _matches("x" * 72, store.users[as_uuid(res.json()["user"]["user_id"])]["user_password"])


async def test_patch_email_differing_only_in_case_returns_409(client, user, user_payload):
    other = (
        await client.post(
            "/api/users",
            json={**user_payload, "user_name": "second", "user_email": "second@example.com"},
        )
    ).json()["user"]

    res = await client.patch(f"/api/users/{other['user_id']}", json={"user_email": "SAM@example.com"})

    assert res.status_code == 409
    assert res.json()["message"] == "user_email SAM@example.com already exists"


async def test_create_email_differing_only_in_case_returns_409(client, user, user_payload):
    res = await client.post(
        "/api/users",
        json={**user_payload, "user_name": "second", "user_email": "SAM@EXAMPLE.COM"},
    )

    assert res.status_code == 409
    assert res.json()["message"] == "user_email SAM@EXAMPLE.COM already exists"
