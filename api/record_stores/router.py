"""
Record store API endpoints.

- /stores, /stores/{record_store_id}: store CRUD
- /record_stores/{user_id}: the user's favourite stores
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db
from core.pagination import FilterOptions, filter_options

from . import favorites, schemas, service

router = APIRouter()


@router.get("/stores")
async def list_all_stores(
    opts: FilterOptions = Depends(filter_options),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_stores(db, opts)


@router.post("/stores", status_code=status.HTTP_201_CREATED)
async def create_record_store(
    payload: schemas.CreateRecordStoreSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_store(db, payload)


@router.get("/stores/{record_store_id}")
async def find_record_store(record_store_id: str, db: Database = Depends(get_db)) -> dict:
    return await service.get_store(db, record_store_id)


@router.patch("/stores/{record_store_id}")
async def edit_record_store(
    record_store_id: str,
    payload: schemas.UpdateRecordStoreSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_store(db, record_store_id, payload)


@router.delete("/stores/{record_store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record_store(record_store_id: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_store(db, record_store_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/record_stores/{user_id}", response_model=None)
async def get_user_record_stores(user_id: str, db: Database = Depends(get_db)) -> dict | Response:
    result = await favorites.list_user_stores(db, user_id)
    if result is None:
        return Response(status_code=status.HTTP_200_OK)
    return result


@router.post("/record_stores/{user_id}")
async def add_user_record_store(
    user_id: str,
    payload: schemas.CreateRecordStoreSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await favorites.create_user_store(db, user_id, payload)


@router.put("/record_stores/{user_id}")
async def add_existing_record_store(
    user_id: str,
    body: schemas.RecordStoreIdSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await favorites.add_existing_user_store(db, user_id, body)


@router.delete("/record_stores/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user_record_store(
    user_id: str,
    body: schemas.RecordStoreIdSchema,
    db: Database = Depends(get_db),
) -> Response:
    await favorites.remove_user_store(db, user_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
