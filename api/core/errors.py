"""
API error hierarchy.

Every failure a handler reports is one of these. The global exception
handlers (see `core/error_handlers.py`) turn them into the response envelope:

    {"status": "fail" | "error", "message": "<text>"}
"""

from __future__ import annotations

import asyncpg

# Errors raised by the store or while talking to it.
STORE_EXCEPTIONS = (asyncpg.PostgresError, asyncpg.InterfaceError, OSError)


class ApiError(Exception):
    http_status: int = 500
    status: str = "error"

    def __init__(self, message: str, *, status: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status is not None:
            self.status = status

    def to_response(self) -> dict[str, str]:
        return {"status": self.status, "message": self.message}


class NotFoundError(ApiError):
    """Identifier does not resolve to a row (absent or malformed)."""

    http_status = 404
    status = "fail"


class ConflictError(ApiError):
    """A uniqueness invariant or a duplicate association."""

    http_status = 409
    status = "fail"


class StoreError(ApiError):
    """Any other persistence failure; carries the raw store error text."""

    http_status = 500
    status = "error"

    @classmethod
    def from_exception(cls, exc: BaseException) -> StoreError:
        return cls(repr(exc))


class RequestValidationFailure(ApiError):
    http_status = 400
    status = "fail"


def is_unique_violation(exc: BaseException) -> bool:
    if isinstance(exc, asyncpg.UniqueViolationError):
        return True
    return getattr(exc, "sqlstate", None) == "23505"
