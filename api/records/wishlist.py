"""
User wishlists (`user_wishlist`).

Same flow as a user's collection, but entries carry an `added_at` timestamp.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError
from core.ids import parse_uuid
from users.service import require_user

from . import repository, schemas, service

logger = logging.getLogger(__name__)


def _wishlist_response(entry: dict[str, Any], record_row: dict[str, Any]) -> dict:
    return {
        "status": "success",
        "user_id": entry["user_id"],
        "wishlist_id": entry["wishlist_id"],
        "added_at": entry["added_at"],
        "record": service.to_record_response(record_row),
    }


async def _insert_entry(db: Database, raw_user_id: str, **ids: Any) -> dict[str, Any]:
    try:
        return await repository.insert_wishlist_entry(db, **ids)
    except STORE_EXCEPTIONS as exc:
        raise StoreError(
            f"error when adding to wishlist for user_id: {raw_user_id}, {exc}", status="fail"
        ) from exc


async def get_wishlist(db: Database, raw_user_id: str) -> dict | None:
    user_id = await require_user(db, raw_user_id)
    record_ids = await repository.list_wishlist_record_ids(db, user_id)
    if not record_ids:
        return None

    records = await service.resolve_records(db, record_ids)
    return {"status": "success", "results": len(records), "wishlist": records}


async def add_new_to_wishlist(db: Database, raw_user_id: str, payload: schemas.CreateRecordSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    record_row = await service.create_record_row(db, payload)
    entry = await _insert_entry(db, raw_user_id, user_id=user_id, record_id=record_row["record_id"])

    logger.info("wishlist_record_created user_id=%s record_id=%s", user_id, record_row["record_id"])
    return _wishlist_response(entry, record_row)


async def add_existing_to_wishlist(db: Database, raw_user_id: str, body: schemas.RecordIdSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    record_row = await service.find_record_row(db, body.record_id)
    if record_row is None:
        raise NotFoundError(f"record_id: {body.record_id} not found")

    record_id = record_row["record_id"]
    if await repository.wishlist_entry_exists(db, user_id=user_id, record_id=record_id):
        raise ConflictError(f"record_id: {body.record_id} already in wishlist")

    entry = await _insert_entry(db, raw_user_id, user_id=user_id, record_id=record_id)
    logger.info("wishlist_record_added user_id=%s record_id=%s", user_id, record_id)
    return _wishlist_response(entry, record_row)


async def remove_from_wishlist(db: Database, raw_user_id: str, body: schemas.RecordIdSchema) -> None:
    user_id = await require_user(db, raw_user_id)
    message = f"No wishlist entry found for user_id: {raw_user_id} and record_id: {body.record_id}"
    record_id = parse_uuid(body.record_id)
    if record_id is None:
        raise NotFoundError(message)

    removed = await repository.delete_wishlist_entry(db, user_id=user_id, record_id=record_id)
    if removed == 0:
        raise NotFoundError(message)
    logger.info("wishlist_record_removed user_id=%s record_id=%s", user_id, record_id)


async def clear_wishlist(db: Database, raw_user_id: str) -> None:
    user_id = await require_user(db, raw_user_id)
    removed = await repository.delete_all_wishlist_entries(db, user_id)
    if removed == 0:
        raise NotFoundError(f"no wishlist records found for user id: {raw_user_id}")
    logger.info("wishlist_cleared user_id=%s removed=%s", user_id, removed)
