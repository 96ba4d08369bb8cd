"""
Note persistence (raw SQL).
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

from core.db import Database

_NOTE_COLUMNS = "id, title, content, category, published, created_at, updated_at"


async def list_notes(db: Database, *, limit: int, offset: int) -> list[dict[str, Any]]:
    return await db.fetch_all(
        f"""
        SELECT {_NOTE_COLUMNS}
        FROM notes
        ORDER BY title, id
        LIMIT $1
        OFFSET $2
        """,
        limit,
        offset,
    )


async def get_note(db: Database, note_id: UUID) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_NOTE_COLUMNS} FROM notes WHERE id = $1", note_id)


async def find_note_by_title(db: Database, title: str) -> dict[str, Any] | None:
    return await db.fetch_one(f"SELECT {_NOTE_COLUMNS} FROM notes WHERE title = $1 LIMIT 1", title)


async def insert_note(
    db: Database,
    *,
    title: str,
    content: str,
    category: str,
    published: bool,
) -> dict[str, Any]:
    return await db.fetch_required(
        f"""
        INSERT INTO notes (title, content, category, published)
        VALUES ($1, $2, $3, $4)
        RETURNING {_NOTE_COLUMNS}
        """,
        title,
        content,
        category,
        published,
    )


async def update_note(
    db: Database,
    note_id: UUID,
    *,
    title: str,
    content: str,
    category: str,
    published: bool,
) -> dict[str, Any] | None:
    return await db.fetch_one(
        f"""
        UPDATE notes
        SET title = $1,
            content = $2,
            category = $3,
            published = $4,
            updated_at = now()
        WHERE id = $5
        RETURNING {_NOTE_COLUMNS}
        """,
        title,
        content,
        category,
        published,
        note_id,
    )


async def delete_note(db: Database, note_id: UUID) -> int:
    return await db.execute("DELETE FROM notes WHERE id = $1", note_id)
