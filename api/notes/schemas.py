"""
Note API schemas.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CreateNoteSchema(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    content: str
    category: str | None = Field(default=None, max_length=100)
    published: bool | None = None


class UpdateNoteSchema(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = None
    category: str | None = Field(default=None, max_length=100)
    published: bool | None = None


class NoteResponse(BaseModel):
    id: UUID
    title: str
    content: str
    category: str
    published: bool
    created_at: datetime
    updated_at: datetime
