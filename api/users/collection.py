"""
A user's record collection (`user_records`).

Every operation verifies the owning user first. The check and the
following statements are separate round-trips, not a transaction.
"""

from __future__ import annotations

import logging
from typing import Any

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError
from core.ids import parse_uuid
from records import service as record_service
from records.schemas import CreateRecordSchema, RecordIdSchema

from . import repository
from .service import require_user

logger = logging.getLogger(__name__)


def _collected_response(join_row: dict[str, Any], record_row: dict[str, Any]) -> dict:
    return {
        "status": "success",
        "records_collected": "1",
        "user_id": join_row["user_id"],
        "user_record_id": join_row["user_record_id"],
        "record": record_service.to_record_response(record_row),
    }


async def _insert_join_row(db: Database, raw_user_id: str, **ids: Any) -> dict[str, Any]:
    try:
        return await repository.insert_user_record(db, **ids)
    except STORE_EXCEPTIONS as exc:
        raise StoreError(
            f"error when collecting records for user_id: {raw_user_id}, {exc}", status="fail"
        ) from exc


async def list_user_records(db: Database, raw_user_id: str) -> dict | None:
    """
    Returns None when the user has collected nothing yet.
    """
    user_id = await require_user(db, raw_user_id)
    record_ids = await repository.list_user_record_ids(db, user_id)
    if not record_ids:
        return None

    records = await record_service.resolve_records(db, record_ids)
    return {"status": "success", "results": len(records), "user_records": records}


async def create_user_record(db: Database, raw_user_id: str, payload: CreateRecordSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    record_row = await record_service.create_record_row(db, payload)
    join_row = await _insert_join_row(db, raw_user_id, user_id=user_id, record_id=record_row["record_id"])

    logger.info(
        "user_record_collected user_id=%s record_id=%s title=%s",
        user_id,
        record_row["record_id"],
        record_row["title"],
    )
    return _collected_response(join_row, record_row)


async def add_existing_user_record(db: Database, raw_user_id: str, body: RecordIdSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    record_row = await record_service.find_record_row(db, body.record_id)
    if record_row is None:
        raise NotFoundError(f"record_id: {body.record_id} not found")

    record_id = record_row["record_id"]
    if await repository.user_record_exists(db, user_id=user_id, record_id=record_id):
        raise ConflictError(f"record_id: {body.record_id} already in collection")

    join_row = await _insert_join_row(db, raw_user_id, user_id=user_id, record_id=record_id)
    logger.info("user_record_added user_id=%s record_id=%s", user_id, record_id)
    return _collected_response(join_row, record_row)


async def remove_user_record(db: Database, raw_user_id: str, body: RecordIdSchema) -> None:
    user_id = await require_user(db, raw_user_id)
    message = f"No user_records found for user_id: {raw_user_id} and record_id: {body.record_id}"
    record_id = parse_uuid(body.record_id)
    if record_id is None:
        raise NotFoundError(message)

    removed = await repository.delete_user_record(db, user_id=user_id, record_id=record_id)
    if removed == 0:
        raise NotFoundError(message)
    logger.info("user_record_removed user_id=%s record_id=%s", user_id, record_id)


async def remove_all_user_records(db: Database, raw_user_id: str) -> None:
    user_id = await require_user(db, raw_user_id)
    removed = await repository.delete_all_user_records(db, user_id)
    if removed == 0:
        raise NotFoundError(f"no records found for user id: {raw_user_id}")
    logger.info("user_records_cleared user_id=%s removed=%s", user_id, removed)
