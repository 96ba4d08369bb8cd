"""
Note API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from core.db import Database, get_db
from core.pagination import FilterOptions, filter_options

from . import schemas, service

router = APIRouter()


@router.get("/notes")
async def note_list(
    opts: FilterOptions = Depends(filter_options),
    db: Database = Depends(get_db),
) -> dict:
    return await service.list_notes(db, opts)


@router.post("/notes", status_code=status.HTTP_201_CREATED)
async def create_note(payload: schemas.CreateNoteSchema, db: Database = Depends(get_db)) -> dict:
    return await service.create_note(db, payload)


@router.get("/notes/{note_id}")
async def read_note(note_id: str, db: Database = Depends(get_db)) -> dict:
    return await service.get_note(db, note_id)


@router.patch("/notes/{note_id}")
async def edit_note(
    note_id: str,
    payload: schemas.UpdateNoteSchema,
    db: Database = Depends(get_db),
) -> dict:
    return await service.update_note(db, note_id, payload)


@router.delete("/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: str, db: Database = Depends(get_db)) -> Response:
    await service.delete_note(db, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
