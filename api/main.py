from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.db import Database
from core.error_handlers import register_error_handlers
from core.observability import setup_logging
from notes import router as notes_router
from record_stores import router as record_stores_router
from records import router as records_router
from users import router as users_router

logger = logging.getLogger(__name__)

STATUS_MESSAGE = "vinyl swarm running"

DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One pool per process; handlers reach it through app.state.
    try:
        app.state.db = await Database.connect()
    except Exception:
        logger.exception("database_connect_failed")
        raise
    logger.info("database_connected")
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


def build_api_router() -> APIRouter:
    api = APIRouter(prefix="/api")

    @api.get("/status")
    def status_check() -> dict:
        return {"status": "ok", "message": STATUS_MESSAGE}

    api.include_router(records_router.router, tags=["records"])
    api.include_router(record_stores_router.router, tags=["record_stores"])
    api.include_router(users_router.router, tags=["users"])
    api.include_router(notes_router.router, tags=["notes"])
    return api


def create_app() -> FastAPI:
    app = FastAPI(title="vinyl-swarm", lifespan=lifespan)
    app.state.db = None

    # Allow local frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(build_api_router())

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/")
    def root() -> dict:
        return {"message": "vinyl-swarm api"}

    return app


app = create_app()


def run() -> None:
    setup_logging()
    port = int(os.environ.get("API_PORT", "8000").strip() or "8000")
    uvicorn.run(
        app,
        host=os.environ.get("API_HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=port,
    )


if __name__ == "__main__":
    run()
