"""
A user's favourite record stores (`user_record_stores`).
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


def _favorite_response(join_row: dict[str, Any], store_row: dict[str, Any]) -> dict:
    return {
        "status": "success",
        "user_id": join_row["user_key"],
        "user_favorite_stores_id": join_row["user_favorite_stores_id"],
        "record_store": service.to_store_response(store_row),
    }


async def _insert_join_row(db: Database, raw_user_id: str, **ids: Any) -> dict[str, Any]:
    try:
        return await repository.insert_user_store(db, **ids)
    except STORE_EXCEPTIONS as exc:
        raise StoreError(
            f"error when saving record store for user_id: {raw_user_id}, {exc}", status="fail"
        ) from exc


async def list_user_stores(db: Database, raw_user_id: str) -> dict | None:
    user_id = await require_user(db, raw_user_id)
    store_ids = await repository.list_user_store_ids(db, user_id)
    if not store_ids:
        return None

    rows = await repository.get_stores_by_ids(db, store_ids)
    stores = [service.to_store_response(row) for row in rows]
    return {"status": "success", "results": len(stores), "user_record_stores": stores}


async def create_user_store(db: Database, raw_user_id: str, payload: schemas.CreateRecordStoreSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    store_row = await service.create_store_row(db, payload)
    join_row = await _insert_join_row(
        db,
        raw_user_id,
        user_id=user_id,
        record_store_id=store_row["record_store_id"],
    )

    logger.info("user_store_created user_id=%s name=%s", user_id, store_row["store_name"])
    return _favorite_response(join_row, store_row)


async def add_existing_user_store(db: Database, raw_user_id: str, body: schemas.RecordStoreIdSchema) -> dict:
    user_id = await require_user(db, raw_user_id)
    store_row = await service.find_store_row(db, body.record_store_id)
    if store_row is None:
        raise NotFoundError(f"record_store_id: {body.record_store_id} not found")

    record_store_id = store_row["record_store_id"]
    if await repository.user_store_exists(db, user_id=user_id, record_store_id=record_store_id):
        raise ConflictError(f"record_store_id: {body.record_store_id} already in favorites")

    join_row = await _insert_join_row(db, raw_user_id, user_id=user_id, record_store_id=record_store_id)
    logger.info("user_store_added user_id=%s name=%s", user_id, store_row["store_name"])
    return _favorite_response(join_row, store_row)


async def remove_user_store(db: Database, raw_user_id: str, body: schemas.RecordStoreIdSchema) -> None:
    user_id = await require_user(db, raw_user_id)
    message = (
        f"no record stores found for user_id: {raw_user_id} "
        f"with record_store_id: {body.record_store_id}"
    )
    record_store_id = parse_uuid(body.record_store_id)
    if record_store_id is None:
        raise NotFoundError(message)

    removed = await repository.delete_user_store(db, user_id=user_id, record_store_id=record_store_id)
    if removed == 0:
        raise NotFoundError(message)
    logger.info("user_store_removed user_id=%s record_store_id=%s", user_id, record_store_id)
