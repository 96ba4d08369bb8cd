"""
Global exception handlers.

- ApiError -> its own envelope and status code
- RequestValidationError -> 400 with field-level detail folded into `message`
- asyncpg / connection errors that escaped a service -> 500 with the raw error text
- Exception (catch-all) -> 500 without internal details
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .errors import STORE_EXCEPTIONS, ApiError, RequestValidationFailure, StoreError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        if exc.http_status >= 500:
            logger.error("api_error path=%s message=%s", request.url.path, exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("validation_error path=%s errors=%s", request.url.path, exc.errors())
        failure = RequestValidationFailure(_validation_message(exc))
        return JSONResponse(status_code=failure.http_status, content=failure.to_response())

    for exc_class in STORE_EXCEPTIONS:
        app.add_exception_handler(exc_class, _store_failure)

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception path=%s", request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "message": "An unexpected error occurred"},
        )


async def _store_failure(request: Request, exc: Exception) -> JSONResponse:
    failure = StoreError.from_exception(exc)
    logger.error("store_error path=%s error=%s", request.url.path, failure.message)
    return JSONResponse(status_code=failure.http_status, content=failure.to_response())


def _validation_message(exc: RequestValidationError) -> str:
    details = []
    for e in exc.errors():
        field = ".".join(str(loc) for loc in e.get("loc", ()))
        details.append(f"{field}: {e.get('msg', 'invalid')}")
    return "Invalid request data: " + "; ".join(details)
