"""Application wiring: status routes, error envelope, missing pool."""

import pytest
from httpx import ASGITransport, AsyncClient

from core.errors import ConflictError, NotFoundError, StoreError
from main import app, cors_origins


async def test_status_route(client):
    res = await client.get("/api/status")

    assert res.status_code == 200
    assert res.json() == {"status": "ok", "message": "vinyl swarm running"}


async def test_health(client):
    assert (await client.get("/health")).json() == {"status": "ok"}


async def test_unknown_route_is_404(client):
    assert (await client.get("/api/nothing-here")).status_code == 404


async def test_without_pool_get_db_fails():
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        res = await ac.get("/api/notes")

    assert res.status_code == 500


@pytest.mark.parametrize(
    ("error", "http_status", "status"),
    [
        (NotFoundError("gone"), 404, "fail"),
        (ConflictError("taken"), 409, "fail"),
        (StoreError("boom"), 500, "error"),
        (StoreError("boom", status="fail"), 500, "fail"),
    ],
)
def test_error_envelope(error, http_status, status):
    assert error.http_status == http_status
    assert error.to_response() == {"status": status, "message": error.message}


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example ,")

    assert cors_origins() == ["https://a.example", "https://b.example"]


def test_cors_origins_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    assert cors_origins() == ["http://localhost:5173", "http://127.0.0.1:5173"]
