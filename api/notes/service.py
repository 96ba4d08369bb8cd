"""
Note business logic.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError, is_unique_violation
from core.ids import require_uuid
from core.pagination import FilterOptions

from . import repository, schemas

logger = logging.getLogger(__name__)


def _conflict(title: str) -> ConflictError:
    return ConflictError(f"Note with title '{title}' already exists")


def to_note_response(row: dict[str, Any]) -> schemas.NoteResponse:
    return schemas.NoteResponse(
        id=row["id"],
        title=str(row["title"]),
        content=str(row["content"]),
        category=str(row.get("category") or ""),
        published=bool(row.get("published") or False),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


async def list_notes(db: Database, opts: FilterOptions) -> dict:
    limit, offset = opts.window()
    try:
        rows = await repository.list_notes(db, limit=limit, offset=offset)
    except STORE_EXCEPTIONS as exc:
        logger.error("list_notes_failed error=%r", exc)
        raise StoreError("Something bad happened while fetching all note items", status="fail") from exc

    notes = [to_note_response(row) for row in rows]
    return {"status": "success", "results": len(notes), "notes": notes}


async def get_note(db: Database, raw_id: str) -> dict:
    message = f"note id: {raw_id} not found"
    row = await repository.get_note(db, require_uuid(raw_id, message))
    if row is None:
        raise NotFoundError(message)
    return {"status": "success", "note": to_note_response(row)}


async def create_note(db: Database, payload: schemas.CreateNoteSchema) -> dict:
    if await repository.find_note_by_title(db, payload.title) is not None:
        raise _conflict(payload.title)

    try:
        row = await repository.insert_note(
            db,
            title=payload.title,
            content=payload.content,
            category=payload.category or "",
            published=bool(payload.published),
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _conflict(payload.title) from exc
        raise StoreError.from_exception(exc) from exc

    logger.info("note_created id=%s title=%s", row["id"], row["title"])
    return {"status": "success", "note": to_note_response(row)}


async def update_note(db: Database, raw_id: str, payload: schemas.UpdateNoteSchema) -> dict:
    message = f"note id: {raw_id} not found"
    note_id = require_uuid(raw_id, message)
    existing = await repository.get_note(db, note_id)
    if existing is None:
        raise NotFoundError(message)

    current = to_note_response(existing)
    title = payload.title if payload.title is not None else current.title
    try:
        row = await repository.update_note(
            db,
            note_id,
            title=title,
            content=payload.content if payload.content is not None else current.content,
            category=payload.category if payload.category is not None else current.category,
            published=payload.published if payload.published is not None else current.published,
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _conflict(title) from exc
        raise StoreError.from_exception(exc) from exc

    if row is None:
        raise NotFoundError(message)

    logger.info("note_updated id=%s", note_id)
    return {"status": "success", "note": to_note_response(row)}


async def delete_note(db: Database, raw_id: str) -> None:
    message = f"note id: {raw_id} not found"
    deleted = await repository.delete_note(db, require_uuid(raw_id, message))
    if deleted == 0:
        raise NotFoundError(message)
    logger.info("note_deleted id=%s", raw_id)
