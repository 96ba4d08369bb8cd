"""
Record store business logic.

A store is unique by (name, address, city, state). Creation checks that
before inserting; an insert that still hits the unique index maps to the
same conflict.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError, is_unique_violation
from core.ids import parse_uuid, require_uuid
from core.pagination import FilterOptions

from . import repository, schemas

logger = logging.getLogger(__name__)


def _conflict(store_name: str) -> ConflictError:
    return ConflictError(f"Record store '{store_name}' already exists.")


def to_store_response(row: dict[str, Any]) -> schemas.RecordStoreResponse:
    return schemas.RecordStoreResponse(
        record_store_id=row["record_store_id"],
        store_name=str(row["store_name"]),
        store_address=str(row["store_address"]),
        store_city=str(row["store_city"]),
        store_state=str(row["store_state"]),
        store_zip=str(row["store_zip"]),
        phone_number=str(row.get("phone_number") or ""),
        website=str(row.get("website") or ""),
    )


async def list_stores(db: Database, opts: FilterOptions) -> dict:
    limit, offset = opts.window()
    try:
        rows = await repository.list_stores(db, limit=limit, offset=offset)
    except STORE_EXCEPTIONS as exc:
        logger.error("list_stores_failed error=%r", exc)
        raise StoreError("Something bad happened while fetching all record stores", status="fail") from exc

    stores = [to_store_response(row) for row in rows]
    return {"status": "success", "results": len(stores), "record_stores": stores}


async def get_store(db: Database, raw_id: str) -> dict:
    message = f"record_store_id {raw_id} not found"
    row = await repository.get_store(db, require_uuid(raw_id, message))
    if row is None:
        raise NotFoundError(message)
    return {"status": "success", "record_store": to_store_response(row)}


async def find_store_row(db: Database, raw_id: str) -> dict[str, Any] | None:
    record_store_id = parse_uuid(raw_id)
    if record_store_id is None:
        return None
    return await repository.get_store(db, record_store_id)


async def create_store_row(db: Database, payload: schemas.CreateRecordStoreSchema) -> dict[str, Any]:
    found = await repository.find_store_by_identity(
        db,
        store_name=payload.store_name,
        store_address=payload.store_address,
        store_city=payload.store_city,
        store_state=payload.store_state,
    )
    if found is not None:
        raise _conflict(str(found["store_name"]))

    try:
        row = await repository.insert_store(
            db,
            store_name=payload.store_name,
            store_address=payload.store_address,
            store_city=payload.store_city,
            store_state=payload.store_state,
            store_zip=payload.store_zip,
            phone_number=payload.phone_number or "",
            website=payload.website or "",
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _conflict(payload.store_name) from exc
        raise StoreError.from_exception(exc) from exc

    logger.info("record_store_created record_store_id=%s name=%s", row["record_store_id"], row["store_name"])
    return row


async def create_store(db: Database, payload: schemas.CreateRecordStoreSchema) -> dict:
    row = await create_store_row(db, payload)
    return {"status": "success", "record_store": to_store_response(row)}


async def update_store(db: Database, raw_id: str, payload: schemas.UpdateRecordStoreSchema) -> dict:
    message = f"record store id: {raw_id} not found"
    record_store_id = require_uuid(raw_id, message)
    existing = await repository.get_store(db, record_store_id)
    if existing is None:
        raise NotFoundError(message)

    current = to_store_response(existing)
    merged = {
        field: value if value is not None else getattr(current, field)
        for field, value in payload.model_dump().items()
    }
    try:
        row = await repository.update_store(db, record_store_id, **merged)
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _conflict(merged["store_name"]) from exc
        raise StoreError.from_exception(exc) from exc

    if row is None:
        raise NotFoundError(message)

    logger.info("record_store_updated record_store_id=%s name=%s", record_store_id, row["store_name"])
    return {"status": "success", "record_store": to_store_response(row)}


async def delete_store(db: Database, raw_id: str) -> None:
    message = f"record store id: {raw_id} not found"
    deleted = await repository.delete_store(db, require_uuid(raw_id, message))
    if deleted == 0:
        raise NotFoundError(message)
    logger.info("record_store_deleted record_store_id=%s", raw_id)
