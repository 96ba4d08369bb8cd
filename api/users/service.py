"""
User business logic.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from core.db import Database
from core.errors import STORE_EXCEPTIONS, ConflictError, NotFoundError, StoreError, is_unique_violation
from core.ids import parse_uuid, require_uuid
from core.pagination import FilterOptions

from . import repository, schemas, security

DEFAULT_USER_LIMIT = 5

logger = logging.getLogger(__name__)


def _duplicate_user(exc: BaseException, user_name: str, user_email: str) -> ConflictError:
    # Constraint names come from sql/schema.sql; the email ones all mention "email".
    constraint = getattr(exc, "constraint_name", None) or ""
    if "email" in constraint:
        return ConflictError(f"user_email {user_email} already exists")
    return ConflictError(f"user_name {user_name} already exists")


def to_public_user(user_row: dict[str, Any]) -> schemas.UserResponse:
    # The stored password hash stops here.
    return schemas.UserResponse(
        user_id=user_row["user_id"],
        user_name=str(user_row["user_name"]),
        user_first_name=str(user_row["user_first_name"]),
        user_last_name=str(user_row["user_last_name"]),
        user_email=str(user_row["user_email"]),
        created_at=user_row["created_at"],
    )


async def require_user(db: Database, raw_user_id: str, *, message: str | None = None) -> UUID:
    """
    Resolve an owner id for association endpoints, or raise NotFoundError.
    """
    message = message or f"user_id {raw_user_id} not found"
    user_id = parse_uuid(raw_user_id)
    if user_id is None or not await repository.user_exists(db, user_id):
        raise NotFoundError(message)
    return user_id


async def list_users(db: Database, opts: FilterOptions) -> dict:
    limit, offset = opts.window(DEFAULT_USER_LIMIT)
    try:
        rows = await repository.list_users(db, limit=limit, offset=offset)
    except STORE_EXCEPTIONS as exc:
        logger.error("list_users_failed error=%r", exc)
        raise StoreError("Something bad happened while fetching some users", status="fail") from exc

    users = [to_public_user(row) for row in rows]
    return {"status": "success", "results": len(users), "users": users}


async def get_user(db: Database, raw_id: str) -> dict:
    message = f"user_id {raw_id} not found"
    row = await repository.get_user(db, require_uuid(raw_id, message))
    if row is None:
        raise NotFoundError(message)
    return {"status": "success", "user": to_public_user(row)}


async def create_user(db: Database, payload: schemas.CreateUserSchema) -> dict:
    existing = await repository.find_user_by_name_or_email(
        db,
        user_name=payload.user_name,
        user_email=payload.user_email,
    )
    if existing is not None:
        if existing["user_name"] == payload.user_name:
            raise ConflictError(f"user_name {payload.user_name} already exists")
        raise ConflictError(f"user_email {payload.user_email} already exists")

    try:
        row = await repository.create_user(
            db,
            user_name=payload.user_name,
            user_first_name=payload.user_first_name,
            user_last_name=payload.user_last_name,
            user_email=payload.user_email,
            password_hash=security.hash_password(payload.user_password),
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _duplicate_user(exc, payload.user_name, payload.user_email) from exc
        raise StoreError.from_exception(exc) from exc

    logger.info("user_created user_id=%s user_name=%s", row["user_id"], row["user_name"])
    return {"status": "success", "user": to_public_user(row)}


async def update_user(db: Database, raw_id: str, payload: schemas.UpdateUserSchema) -> dict:
    message = f"user id: {raw_id} not found"
    user_id = require_uuid(raw_id, message)
    existing = await repository.get_user(db, user_id)
    if existing is None:
        raise NotFoundError(message)

    # Only a newly supplied password is hashed; otherwise the stored hash is kept as is.
    password_hash = (
        security.hash_password(payload.user_password)
        if payload.user_password is not None
        else str(existing["user_password"])
    )
    user_name = payload.user_name if payload.user_name is not None else str(existing["user_name"])
    user_email = payload.user_email if payload.user_email is not None else str(existing["user_email"])
    try:
        row = await repository.update_user(
            db,
            user_id,
            user_name=user_name,
            user_first_name=(
                payload.user_first_name if payload.user_first_name is not None else str(existing["user_first_name"])
            ),
            user_last_name=(
                payload.user_last_name if payload.user_last_name is not None else str(existing["user_last_name"])
            ),
            user_email=user_email,
            password_hash=password_hash,
        )
    except STORE_EXCEPTIONS as exc:
        if is_unique_violation(exc):
            raise _duplicate_user(exc, user_name, user_email) from exc
        raise StoreError.from_exception(exc) from exc

    if row is None:
        raise NotFoundError(message)

    logger.info("user_updated user_id=%s", user_id)
    return {"status": "success", "user": to_public_user(row)}


async def delete_user(db: Database, raw_id: str) -> None:
    message = f"user id: {raw_id} not found"
    deleted = await repository.delete_user(db, require_uuid(raw_id, message))
    if deleted == 0:
        raise NotFoundError(message)
    logger.info("user_deleted user_id=%s", raw_id)
