"""
User API endpoints.

- /users, /users/{user_id}: user CRUD
- /users/records/{user_id}: the user's record collection
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db
from core.pagination import FilterOptions, filter_options
from records.schemas import CreateRecordSchema, RecordIdSchema

from . import collection, schemas, service

router = APIRouter()


@router.get("/users")
async def list_users(
    opts: FilterOptions = Depends(filter_options),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_users(db, opts)


@router.post("/users", status_code=status.HTTP_201_CREATED)
async def create_user(
    payload: schemas.CreateUserSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_user(db, payload)


@router.get("/users/{user_id}")
async def find_user(user_id: str, db: Database = Depends(get_db)) -> dict:
    return await service.get_user(db, user_id)


@router.patch("/users/{user_id}")
async def edit_user(
    user_id: str,
    payload: schemas.UpdateUserSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_user(db, user_id, payload)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_user(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/users/records/{user_id}", response_model=None)
async def get_user_records(user_id: str, db: Database = Depends(get_db)) -> dict | Response:
    result = await collection.list_user_records(db, user_id)
    if result is None:
        return Response(status_code=status.HTTP_200_OK)
    return result


@router.post("/users/records/{user_id}")
async def create_user_record(
    user_id: str,
    payload: CreateRecordSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await collection.create_user_record(db, user_id, payload)


@router.put("/users/records/{user_id}")
async def put_user_record(
    user_id: str,
    body: RecordIdSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await collection.add_existing_user_record(db, user_id, body)


@router.patch("/users/records/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user_record(
    user_id: str,
    body: RecordIdSchema,
    db: Database = Depends(get_db),
) -> Response:
    await collection.remove_user_record(db, user_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/users/records/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_all_user_records(user_id: str, db: Database = Depends(get_db)) -> Response:
    await collection.remove_all_user_records(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
