"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. FastAPI opens it on startup, stores it on
`app.state.db` and closes it on shutdown (see `api/main.py`). Request handlers
receive it through the `get_db` dependency.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import os
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import asyncpg
from fastapi import Request


DEFAULT_POOL_MIN_SIZE = 1
DEFAULT_POOL_MAX_SIZE = 10
DEFAULT_COMMAND_TIMEOUT = 30


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _sanitize_database_url(url: str) -> str:
    parts = urlsplit(url)
    if not parts.query:
        return url

    params = [(k, v) for (k, v) in parse_qsl(parts.query, keep_blank_values=True) if k != "sslmode"]
    query = urlencode(params)
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def database_url() -> str:
    url = os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL is not set.")
    return _sanitize_database_url(url)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


def _affected_rows(status: str) -> int:
    """
    Parse the row count from an asyncpg command tag.

    "DELETE 3" -> 3, "UPDATE 0" -> 0, "INSERT 0 1" -> 1.
    """
    last = (status or "").rsplit(" ", 1)[-1]
    return int(last) if last.isdigit() else 0


class Database:
    """
    Thin gateway over a shared asyncpg pool.

    Never retries; store errors (including unique violations) propagate to
    the caller unchanged.
    """

    def __init__(self, pool: asyncpg.Pool) -> None:
        self._pool = pool

    @classmethod
    async def connect(
        cls,
        url: str | None = None,
        *,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: float | None = None,
    ) -> Database:
        pool = await asyncpg.create_pool(
            dsn=url or database_url(),
            min_size=min_size or _env_int("DB_POOL_MIN_SIZE", DEFAULT_POOL_MIN_SIZE),
            max_size=max_size or _env_int("DB_POOL_MAX_SIZE", DEFAULT_POOL_MAX_SIZE),
            command_timeout=command_timeout or _env_int("DB_COMMAND_TIMEOUT", DEFAULT_COMMAND_TIMEOUT),
        )
        return cls(pool)

    async def close(self) -> None:
        await self._pool.close()

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._pool.fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_required(self, sql: str, *args: Any) -> dict[str, Any]:
        """
        Like `fetch_one`, for statements that must produce a row (INSERT ... RETURNING).
        """
        row = await self.fetch_one(sql, *args)
        if row is None:
            raise RuntimeError("Statement returned no row.")
        return row

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._pool.fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def fetch_column(self, sql: str, *args: Any) -> list[Any]:
        rows = await self._pool.fetch(sql, *args)
        return [r[0] for r in rows]

    async def execute(self, sql: str, *args: Any) -> int:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL) and return the affected-row count.
        """
        status = await self._pool.execute(sql, *args)
        return _affected_rows(status)


def get_db(request: Request) -> Database:
    db = getattr(request.app.state, "db", None)
    if db is None:
        raise RuntimeError("Database is not initialized. It is opened in the app lifespan.")
    return db
