"""
Record store API schemas (request/response models).
"""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field


class CreateRecordStoreSchema(BaseModel):
    store_name: str = Field(..., min_length=1, max_length=255)
    store_address: str = Field(..., min_length=1, max_length=255)
    store_city: str = Field(..., min_length=1, max_length=100)
    store_state: str = Field(..., min_length=1, max_length=100)
    store_zip: str = Field(..., min_length=1, max_length=20)
    phone_number: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=500)


class UpdateRecordStoreSchema(BaseModel):
    store_name: str | None = Field(default=None, min_length=1, max_length=255)
    store_address: str | None = Field(default=None, min_length=1, max_length=255)
    store_city: str | None = Field(default=None, min_length=1, max_length=100)
    store_state: str | None = Field(default=None, min_length=1, max_length=100)
    store_zip: str | None = Field(default=None, min_length=1, max_length=20)
    phone_number: str | None = Field(default=None, max_length=50)
    website: str | None = Field(default=None, max_length=500)


class RecordStoreIdSchema(BaseModel):
    # String on purpose: a malformed id is reported as not found.
    record_store_id: str = Field(..., min_length=1)


class RecordStoreResponse(BaseModel):
    record_store_id: UUID
    store_name: str
    store_address: str
    store_city: str
    store_state: str
    store_zip: str
    phone_number: str
    website: str
