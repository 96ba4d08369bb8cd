"""
Record API schemas (request/response models).
"""

from __future__ import annotations

from datetime import date, time
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

DEFAULT_FORMAT = "LP"
DEFAULT_PRICE = Decimal("0")


class CreateRecordSchema(BaseModel):
    artist: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=255)
    released: date
    genre: list[str] | None = None
    format: str | None = Field(default=None, max_length=50)
    price: Decimal | None = Field(default=None, ge=0)
    label: str = Field(..., max_length=255)
    duration_length: time


class UpdateRecordSchema(BaseModel):
    artist: str | None = Field(default=None, min_length=1, max_length=255)
    title: str | None = Field(default=None, min_length=1, max_length=255)
    released: date | None = None
    genre: list[str] | None = None
    format: str | None = Field(default=None, max_length=50)
    price: Decimal | None = Field(default=None, ge=0)
    label: str | None = Field(default=None, max_length=255)
    duration_length: time | None = None


class RecordIdSchema(BaseModel):
    """
    Body for attaching/detaching an existing record.

    Kept as a string: an id that is not a UUID is reported as not found.
    """

    record_id: str = Field(..., min_length=1)


class RecordResponse(BaseModel):
    record_id: UUID
    artist: str
    title: str
    released: date
    genre: list[str]
    format: str
    price: Decimal
    label: str
    duration_length: time
