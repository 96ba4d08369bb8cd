"""
Record business logic.

Scope:
- record catalog CRUD
- `create_record_row`, shared by the user collection and wishlist flows
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError, is_unique_violation
from core.ids import parse_uuid, require_uuid
from core.pagination import FilterOptions

from . import repository, schemas

logger = logging.getLogger(__name__)


def combine_genres(genre: list[str] | None) -> list[str]:
    """
    Normalize a supplied genre list: trim, drop blanks, keep first occurrence order.
    """
    combined: list[str] = []
    for item in genre or []:
        name = (item or "").strip()
        if name and name not in combined:
            combined.append(name)
    return combined


def to_record_response(row: dict[str, Any]) -> schemas.RecordResponse:
    price = row.get("price")
    return schemas.RecordResponse(
        record_id=row["record_id"],
        artist=str(row["artist"]),
        title=str(row["title"]),
        released=row["released"],
        genre=list(row.get("genre") or []),
        format=str(row["format"]),
        price=price if price is not None else schemas.DEFAULT_PRICE,
        label=str(row["label"]),
        duration_length=row["duration_length"],
    )


async def list_records(db: Database, opts: FilterOptions) -> dict:
    limit, offset = opts.window()
    try:
        rows = await repository.list_records(db, limit=limit, offset=offset)
    except STORE_EXCEPTIONS as exc:
        logger.error("list_records_failed error=%r", exc)
        raise StoreError("Something bad happened while fetching all records", status="fail") from exc

    records = [to_record_response(row) for row in rows]
    return {"status": "success", "results": len(records), "records": records}


async def get_record(db: Database, raw_id: str) -> dict:
    message = f"record_id {raw_id} not found"
    row = await repository.get_record(db, require_uuid(raw_id, message))
    if row is None:
        raise NotFoundError(message)
    return {"status": "success", "record": to_record_response(row)}


async def find_record_row(db: Database, raw_id: str) -> dict[str, Any] | None:
    record_id = parse_uuid(raw_id)
    if record_id is None:
        return None
    return await repository.get_record(db, record_id)


async def resolve_records(db: Database, record_ids: list[UUID]) -> list[schemas.RecordResponse]:
    rows = await repository.get_records_by_ids(db, record_ids)
    return [to_record_response(row) for row in rows]


async def create_record_row(db: Database, payload: schemas.CreateRecordSchema) -> dict[str, Any]:
    """
    Insert a record with defaults applied; maps store failures to API errors.
    """
    try:
        row = await repository.insert_record(
            db,
            artist=payload.artist,
            title=payload.title,
            released=payload.released,
            genre=combine_genres(payload.genre),
            format=payload.format or schemas.DEFAULT_FORMAT,
            price=payload.price if payload.price is not None else schemas.DEFAULT_PRICE,
            label=payload.label,
            duration_length=payload.duration_length,
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise ConflictError(f"record {payload.title} by {payload.artist} already exists") from exc
        raise StoreError.from_exception(exc) from exc

    logger.info("record_created record_id=%s artist=%s title=%s", row["record_id"], row["artist"], row["title"])
    return row


async def create_record(db: Database, payload: schemas.CreateRecordSchema) -> dict:
    row = await create_record_row(db, payload)
    return {"status": "success", "record": to_record_response(row)}


async def update_record(db: Database, raw_id: str, payload: schemas.UpdateRecordSchema) -> dict:
    message = f"record id: {raw_id} not found"
    record_id = require_uuid(raw_id, message)
    existing = await repository.get_record(db, record_id)
    if existing is None:
        raise NotFoundError(message)

    current = to_record_response(existing)
    merged = {
        "artist": payload.artist if payload.artist is not None else current.artist,
        "title": payload.title if payload.title is not None else current.title,
        "released": payload.released if payload.released is not None else current.released,
        "genre": combine_genres(payload.genre) if payload.genre is not None else current.genre,
        "format": (payload.format or schemas.DEFAULT_FORMAT) if payload.format is not None else current.format,
        "price": payload.price if payload.price is not None else current.price,
        "label": payload.label if payload.label is not None else current.label,
        "duration_length": (
            payload.duration_length if payload.duration_length is not None else current.duration_length
        ),
    }
    try:
        row = await repository.update_record(db, record_id, **merged)
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise ConflictError(f"record {merged['title']} by {merged['artist']} already exists") from exc
        raise StoreError.from_exception(exc) from exc

    if row is None:
        raise NotFoundError(message)

    logger.info("record_updated record_id=%s", record_id)
    return {"status": "success", "record": to_record_response(row)}


async def delete_record(db: Database, raw_id: str) -> None:
    message = f"record id: {raw_id} not found"
    deleted = await repository.delete_record(db, require_uuid(raw_id, message))
    if deleted == 0:
        raise NotFoundError(message)
    logger.info("record_deleted record_id=%s", raw_id)
