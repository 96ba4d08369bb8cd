"""
User persistence (raw SQL).

Also owns the `user_records` join table: a user's record collection.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database

_USER_COLUMNS = """
    user_id, user_name, user_first_name, user_last_name,
    user_email, user_password, created_at
"""


async def list_users(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        ORDER BY user_name, user_id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_user(db: Database, user_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        WHERE user_id = $1
        """,
        user_id,
    )


async def user_exists(db: Database, user_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM users
        WHERE user_id = $1
        LIMIT 1
        """,
        user_id,
    )
    return row is not None


async def find_user_by_name_or_email(
    db: Database,
    *,
    user_name: str,
    user_email: str,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        SELECT {_USER_COLUMNS}
        FROM users
        WHERE user_name = $1
           OR lower(user_email) = lower($2)
        LIMIT 1
        """,
        user_name,
        user_email,
    )


async def create_user(
    db: Database,
    *,
    user_name: str,
    user_first_name: str,
    user_last_name: str,
    user_email: str,
    password_hash: str,
) -> dict[str, Any]:
    return await db.fetch_required(
        f"""
        INSERT INTO users (user_name, user_first_name, user_last_name, user_email, user_password)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_USER_COLUMNS}
        """,
        user_name,
        user_first_name,
        user_last_name,
        user_email,
        password_hash,
    )


async def update_user(
    db: Database,
    user_id: UUID,
    *,
    user_name: str,
    user_first_name: str,
    user_last_name: str,
    user_email: str,
    password_hash: str,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE users
        SET user_name = $1,
            user_first_name = $2,
            user_last_name = $3,
            user_email = $4,
            user_password = $5
        WHERE user_id = $6
        RETURNING {_USER_COLUMNS}
        """,
        user_name,
        user_first_name,
        user_last_name,
        user_email,
        password_hash,
        user_id,
    )


async def delete_user(db: Database, user_id: UUID) -> int:
    # Join rows go with it (ON DELETE CASCADE).
    return await db.execute("DELETE FROM users WHERE user_id = $1", user_id)


async def list_user_record_ids(db: Database, user_id: UUID) -> list[UUID]:
    return await db.fetch_column(
        """
        SELECT record_id
        FROM user_records
        WHERE user_id = $1
        ORDER BY user_record_id
        """,
        user_id,
    )


async def user_record_exists(db: Database, *, user_id: UUID, record_id: UUID) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM user_records
        WHERE user_id = $1
          AND record_id = $2
        LIMIT 1
        """,
        user_id,
        record_id,
    )
    return row is not None


async def insert_user_record(db: Database, *, user_id: UUID, record_id: UUID) -> dict[str, Any]:
    return await db.fetch_required(
        """
        INSERT INTO user_records (user_id, record_id)
        VALUES ($1, $2)
        RETURNING user_record_id, user_id, record_id
        """,
        user_id,
        record_id,
    )


async def delete_user_record(db: Database, *, user_id: UUID, record_id: UUID) -> int:
    return await db.execute(
        """
        DELETE FROM user_records
        WHERE user_id = $1
          AND record_id = $2
        """,
        user_id,
        record_id,
    )


async def delete_all_user_records(db: Database, user_id: UUID) -> int:
    return await db.execute("DELETE FROM user_records WHERE user_id = $1", user_id)
