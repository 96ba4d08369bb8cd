"""
Record persistence (raw SQL).

Also owns the `user_wishlist` join table.
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from typing import Any
from uuid import UUID

from core.db import Database

_RECORD_COLUMNS = """
    record_id, artist, title, released, genre, format, price, label, duration_length
"""


async def list_records(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_RECORD_COLUMNS}
        FROM records
        ORDER BY artist, record_id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_record(db: Database, record_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_RECORD_COLUMNS}
        FROM records
        WHERE record_id = $1
        """,
        record_id,
    )


async def get_records_by_ids(db: Database, record_ids: list[UUID]) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_RECORD_COLUMNS}
        FROM records
        WHERE record_id = ANY($1::uuid[])
        ORDER BY artist, record_id
        """,
        record_ids,
    )


async def insert_record(
    db: Database,
    *,
    artist: str,
    title: str,
    released: date,
    genre: list[str],
    format: str,
    price: Decimal,
    label: str,
    duration_length: time,
) -> dict[str, Any]:
    return await db.fetch_required(
        f"""
        INSERT INTO records (artist, title, released, genre, format, price, label, duration_length)
        VALUES ($1, $2, $3, $4, $5, $6, $7, $8)
        RETURNING {_RECORD_COLUMNS}
        """,
        artist,
        title,
        released,
        genre,
        format,
        price,
        label,
        duration_length,
    )


async def update_record(
    db: Database,
    record_id: UUID,
    *,
    artist: str,
    title: str,
    released: date,
    genre: list[str],
    format: str,
    price: Decimal,
    label: str,
    duration_length: time,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE records
        SET artist = $1,
            title = $2,
            released = $3,
            genre = $4,
            format = $5,
            price = $6,
            label = $7,
            duration_length = $8
        WHERE record_id = $9
        RETURNING {_RECORD_COLUMNS}
        """,
        artist,
        title,
        released,
        genre,
        format,
        price,
        label,
        duration_length,
        record_id,
    )


async def delete_record(db: Database, record_id: UUID) -> int:
    return await db.execute("DELETE FROM records WHERE record_id = $1", record_id)


async def list_wishlist_record_ids(db: Database, user_id: UUID) -> list[UUID]:
    return await db.fetch_column(
        """
        SELECT record_id
        FROM user_wishlist
        WHERE user_id = $1
        ORDER BY added_at, wishlist_id
        """,
        user_id,
    )


async def wishlist_entry_exists(db: Database, *, user_id: UUID, record_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM user_wishlist
        WHERE user_id = $1
          AND record_id = $2
        LIMIT 1
        """,
        user_id,
        record_id,
    )
    return row is not None


async def insert_wishlist_entry(db: Database, *, user_id: UUID, record_id: UUID) -> dict[str, Any]:
    return await db.fetch_required(
        """
        INSERT INTO user_wishlist (user_id, record_id)
        VALUES ($1, $2)
        RETURNING wishlist_id, user_id, record_id, added_at
        """,
        user_id,
        record_id,
    )


async def delete_wishlist_entry(db: Database, *, user_id: UUID, record_id: UUID) -> int:
    return await db.execute(
        """
        DELETE FROM user_wishlist
        WHERE user_id = $1
          AND record_id = $2
        """,
        user_id,
        record_id,
    )


async def delete_all_wishlist_entries(db: Database, user_id: UUID) -> int:
    return await db.execute("DELETE FROM user_wishlist WHERE user_id = $1", user_id)
