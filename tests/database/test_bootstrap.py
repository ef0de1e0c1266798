from __future__ import annotations

import re

from campus_system.database.bootstrap import SCHEMA_PATH, _strip_comments, _strip_create_db_and_use, iter_sql_statements
from campus_system.entities.catalog import ALL_RESOURCES


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";  ; SELECT 1"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;y"', "SELECT 1"]


def test_schema_is_database_agnostic():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA_PATH.read_text(encoding="utf-8")))

    statements = list(iter_sql_statements(sql))

    assert statements
    assert all(s.upper().startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_schema_declares_every_entity_column():
    sql = SCHEMA_PATH.read_text(encoding="utf-8")

    for resource in ALL_RESOURCES:
        match = re.search(rf"CREATE TABLE IF NOT EXISTS {resource.table} \((.*?)\) ENGINE", sql, re.S)
        assert match, resource.table
        body = match.group(1)
        for column in ("id", *resource.fields, "created_at", "updated_at"):
            assert re.search(rf"^\s*`?{column}`?\s", body, re.M), f"{resource.table}.{column}"
