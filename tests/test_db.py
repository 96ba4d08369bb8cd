"""Database gateway: row mapping and command-tag parsing over a stub pool."""

import pytest

from core.db import Database, _affected_rows, database_url


class StubPool:
    def __init__(self, rows=(), status="SELECT 0"):
        self.rows = list(rows)
        self.status = status
        self.calls = []
        self.closed = False

    async def fetchrow(self, sql, *args):
        self.calls.append((sql, args))
        return self.rows[0] if self.rows else None

    async def fetch(self, sql, *args):
        self.calls.append((sql, args))
        return self.rows

    async def execute(self, sql, *args):
        self.calls.append((sql, args))
        return self.status

    async def close(self):
        self.closed = True


class Row(dict):
    """Mapping that also indexes by position, like asyncpg.Record."""

    def __getitem__(self, key):
        if isinstance(key, int):
            return list(self.values())[key]
        return super().__getitem__(key)


async def test_fetch_one_returns_dict_or_none():
    db = Database(StubPool(rows=[Row(id=1, title="a")]))
    assert await db.fetch_one("SELECT 1 WHERE id = $1", 1) == {"id": 1, "title": "a"}

    empty = Database(StubPool())
    assert await empty.fetch_one("SELECT 1") is None


async def test_fetch_required_raises_without_row():
    db = Database(StubPool())

    with pytest.raises(RuntimeError):
        await db.fetch_required("INSERT INTO notes DEFAULT VALUES RETURNING id")


async def test_fetch_all_and_column():
    pool = StubPool(rows=[Row(record_id="r1", n=1), Row(record_id="r2", n=2)])
    db = Database(pool)

    assert await db.fetch_all("SELECT *") == [{"record_id": "r1", "n": 1}, {"record_id": "r2", "n": 2}]
    assert await db.fetch_column("SELECT record_id") == ["r1", "r2"]
    assert pool.calls[-1] == ("SELECT record_id", ())


@pytest.mark.parametrize(
    ("status", "expected"),
    [("DELETE 3", 3), ("UPDATE 0", 0), ("INSERT 0 1", 1), ("CREATE TABLE", 0), ("", 0)],
)
def test_affected_rows(status, expected):
    assert _affected_rows(status) == expected


async def test_execute_returns_row_count():
    pool = StubPool(status="DELETE 2")
    db = Database(pool)

    assert await db.execute("DELETE FROM user_records WHERE user_id = $1", "u") == 2
    assert pool.calls == [("DELETE FROM user_records WHERE user_id = $1", ("u",))]

    await db.close()
    assert pool.closed


def test_database_url_strips_sslmode(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db:5432/vinyl?sslmode=require&application_name=api")

    assert database_url() == "postgresql://u:p@db:5432/vinyl?application_name=api"


def test_database_url_required(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "  ")

    with pytest.raises(RuntimeError):
        database_url()
