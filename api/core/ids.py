"""
Identifier parsing.

A path or body identifier that is not a valid UUID can never match a row, so
callers treat it exactly like an absent row.
"""

from __future__ import annotations

from uuid import UUID

from .errors import NotFoundError


def parse_uuid(raw: str | UUID) -> UUID | None:
    if isinstance(raw, UUID):
        return raw
    try:
        return UUID(str(raw).strip())
    except ValueError:
        return None


def require_uuid(raw: str | UUID, not_found_message: str) -> UUID:
    value = parse_uuid(raw)
    if value is None:
        raise NotFoundError(not_found_message)
    return value
