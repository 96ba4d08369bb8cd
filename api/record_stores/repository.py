"""
Record store persistence (raw SQL).

Also owns the `user_record_stores` join table (a user's favourite stores).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database

_STORE_COLUMNS = """
    record_store_id, store_name, store_address, store_city, store_state,
    store_zip, phone_number, website
"""


async def list_stores(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_STORE_COLUMNS}
        FROM record_stores
        ORDER BY store_name, record_store_id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_store(db: Database, record_store_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_STORE_COLUMNS}
        FROM record_stores
        WHERE record_store_id = $1
        """,
        record_store_id,
    )


async def get_stores_by_ids(db: Database, record_store_ids: list[UUID]) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_STORE_COLUMNS}
        FROM record_stores
        WHERE record_store_id = ANY($1::uuid[])
        ORDER BY store_name, record_store_id
        """,
        record_store_ids,
    )


async def find_store_by_identity(
    db: Database,
    *,
    store_name: str,
    store_address: str,
    store_city: str,
    store_state: str,
) -> dict[str, Any] | None:
    """
    A store is identified by (name, address, city, state).
    """
    return await db.fetch_one(
        f"""
        SELECT {_STORE_COLUMNS}
        FROM record_stores
        WHERE store_name = $1
          AND store_address = $2
          AND store_city = $3
          AND store_state = $4
        LIMIT 1
        """,
        store_name,
        store_address,
        store_city,
        store_state,
    )


async def insert_store(
    db: Database,
    *,
    store_name: str,
    store_address: str,
    store_city: str,
    store_state: str,
    store_zip: str,
    phone_number: str,
    website: str,
) -> dict[str, Any]:
    return await db.fetch_required(
        f"""
        INSERT INTO record_stores
          (store_name, store_address, store_city, store_state, store_zip, phone_number, website)
        VALUES ($1, $2, $3, $4, $5, $6, $7)
        RETURNING {_STORE_COLUMNS}
        """,
        store_name,
        store_address,
        store_city,
        store_state,
        store_zip,
        phone_number,
        website,
    )


async def update_store(
    db: Database,
    record_store_id: UUID,
    *,
    store_name: str,
    store_address: str,
    store_city: str,
    store_state: str,
    store_zip: str,
    phone_number: str,
    website: str,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE record_stores
        SET store_name = $1,
            store_address = $2,
            store_city = $3,
            store_state = $4,
            store_zip = $5,
            phone_number = $6,
            website = $7
        WHERE record_store_id = $8
        RETURNING {_STORE_COLUMNS}
        """,
        store_name,
        store_address,
        store_city,
        store_state,
        store_zip,
        phone_number,
        website,
        record_store_id,
    )


async def delete_store(db: Database, record_store_id: UUID) -> int:
    return await db.execute("DELETE FROM record_stores WHERE record_store_id = $1", record_store_id)


async def list_user_store_ids(db: Database, user_id: UUID) -> list[UUID]:
    return await db.fetch_column(
        """
        SELECT record_store_id
        FROM user_record_stores
        WHERE user_key = $1
        ORDER BY user_favorite_stores_id
        """,
        user_id,
    )


async def user_store_exists(db: Database, *, user_id: UUID, record_store_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM user_record_stores
        WHERE user_key = $1
          AND record_store_id = $2
        LIMIT 1
        """,
        user_id,
        record_store_id,
    )
    return row is not None


async def insert_user_store(db: Database, *, user_id: UUID, record_store_id: UUID) -> dict[str, Any]:
    return await db.fetch_required(
        """
        INSERT INTO user_record_stores (user_key, record_store_id)
        VALUES ($1, $2)
        RETURNING user_favorite_stores_id, user_key, record_store_id
        """,
        user_id,
        record_store_id,
    )


async def delete_user_store(db: Database, *, user_id: UUID, record_store_id: UUID) -> int:
    return await db.execute(
        """
        DELETE FROM user_record_stores
        WHERE user_key = $1
          AND record_store_id = $2
        """,
        user_id,
        record_store_id,
    )
