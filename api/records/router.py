"""
Record API endpoints.

- /records, /records/{record_id}: record catalog CRUD
- /records/wishlist/{user_id}: the user's wishlist
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db
from core.pagination import FilterOptions, filter_options

from . import schemas, service, wishlist

router = APIRouter()


@router.get("/records")
async def list_records(
    opts: FilterOptions = Depends(filter_options),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_records(db, opts)


@router.post("/records", status_code=status.HTTP_201_CREATED)
async def create_record(
    payload: schemas.CreateRecordSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.create_record(db, payload)


@router.get("/records/{record_id}")
async def find_record(record_id: str, db: Database = Depends(get_db)) -> dict:
    return await service.get_record(db, record_id)


@router.patch("/records/{record_id}")
async def edit_record(
    record_id: str,
    payload: schemas.UpdateRecordSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_record(db, record_id, payload)


@router.delete("/records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(record_id: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_record(db, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/records/wishlist/{user_id}", response_model=None)
async def get_users_wishlist(user_id: str, db: Database = Depends(get_db)) -> dict | Response:
    result = await wishlist.get_wishlist(db, user_id)
    if result is None:
        return Response(status_code=status.HTTP_200_OK)
    return result


@router.post("/records/wishlist/{user_id}")
async def add_to_user_wishlist(
    user_id: str,
    payload: schemas.CreateRecordSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await wishlist.add_new_to_wishlist(db, user_id, payload)


@router.put("/records/wishlist/{user_id}")
async def put_wishlist_record(
    user_id: str,
    body: schemas.RecordIdSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await wishlist.add_existing_to_wishlist(db, user_id, body)


@router.patch("/records/wishlist/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_wishlist_record(
    user_id: str,
    body: schemas.RecordIdSchema,
    db: Database = Depends(get_db),
) -> Response:
    await wishlist.remove_from_wishlist(db, user_id, body)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/records/wishlist/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user_wishlist(user_id: str, db: Database = Depends(get_db)) -> Response:
    await wishlist.clear_wishlist(db, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
