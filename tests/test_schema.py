"""Relational schema: constraints the handlers rely on but never enforce themselves.

Invariants:
    - Every association foreign key cascades on delete
    - user_name is unique; user_email is unique ignoring case
    - Constraint names carry the field name used in 409 messages
"""

import re
from pathlib import Path

import pytest

SCHEMA = (Path(__file__).resolve().parents[1] / "sql" / "schema.sql").read_text(encoding="utf-8")


def _table(name):
    match = re.search(rf"CREATE TABLE IF NOT EXISTS {name} \((.*?)\n\);", SCHEMA, re.S)
    assert match, f"table {name} missing"
    return match.group(1)


@pytest.mark.parametrize(
    ("table", "columns"),
    [
        ("user_records", ("user_id", "record_id")),
        ("user_record_stores", ("user_key", "record_store_id")),
        ("user_wishlist", ("user_id", "record_id")),
    ],
)
def test_association_foreign_keys_cascade(table, columns):
    body = _table(table)

    for column in columns:
        line = next(row for row in body.splitlines() if row.strip().startswith(column + " "))
        assert "REFERENCES" in line
        assert line.rstrip(",").endswith("ON DELETE CASCADE")


def test_user_name_constraint_mentions_name():
    assert "CONSTRAINT users_user_name_key UNIQUE (user_name)" in _table("users")


def test_user_email_unique_ignoring_case():
    assert re.search(r"CREATE UNIQUE INDEX IF NOT EXISTS \w*email\w* ON users \(lower\(user_email\)\);", SCHEMA)
