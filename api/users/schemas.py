"""
User API schemas (request/response models).
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from .security import check_password_length


class CreateUserSchema(BaseModel):
    user_name: str = Field(..., min_length=1, max_length=100)
    user_first_name: str = Field(..., min_length=1, max_length=100)
    user_last_name: str = Field(..., min_length=1, max_length=100)
    user_email: str = Field(..., min_length=3, max_length=320)
    user_password: str = Field(..., min_length=1, max_length=128)

    @field_validator("user_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        return check_password_length(value)


class UpdateUserSchema(BaseModel):
    user_name: str | None = Field(default=None, min_length=1, max_length=100)
    user_first_name: str | None = Field(default=None, min_length=1, max_length=100)
    user_last_name: str | None = Field(default=None, min_length=1, max_length=100)
    user_email: str | None = Field(default=None, min_length=3, max_length=320)
    user_password: str | None = Field(default=None, min_length=1, max_length=128)

    @field_validator("user_password")
    @classmethod
    def password_fits_bcrypt(cls, value: str | None) -> str | None:
        return check_password_length(value) if value is not None else None


class UserResponse(BaseModel):
    # Public shape of a user row: never carries the password hash.
    user_id: UUID
    user_name: str
    user_first_name: str
    user_last_name: str
    user_email: str
    created_at: datetime
