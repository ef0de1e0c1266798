from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, quote_identifier
from .definition import Resource
from .repository import Record, RecordRepository

ID_COLUMN = "id"
TIMESTAMP_COLUMNS = ("created_at", "updated_at")


def parse_record_id(record_id: Any) -> Optional[int]:
    """Return the AUTO_INCREMENT key for a path segment, or None if it cannot exist."""
    try:
        value = int(str(record_id).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


class MySQLRecordRepository(RecordRepository):
    """One table per entity; columns are named after the payload fields."""

    def __init__(self, conn_factory: DatabaseConnection, resource: Resource):
        self._conn_factory = conn_factory
        self._fields = resource.fields
        self._table = quote_identifier(resource.table)

        columns = (ID_COLUMN, *self._fields, *TIMESTAMP_COLUMNS)
        self._select_sql = f"SELECT {', '.join(quote_identifier(c) for c in columns)} FROM {self._table}"

    def _values(self, record: Mapping[str, Any]) -> tuple[Any, ...]:
        return tuple(record.get(f) for f in self._fields)

    def _select_one(self, cur, pk: int, *, for_update: bool = False) -> Optional[Record]:
        sql = f"{self._select_sql} WHERE {ID_COLUMN}=%s"
        if for_update:
            sql += " FOR UPDATE"
        cur.execute(sql, (pk,))
        return fetchone(cur)

    def create(self, record: Mapping[str, Any]) -> Record:
        columns = ", ".join(quote_identifier(f) for f in self._fields)
        placeholders = ", ".join(["%s"] * len(self._fields))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO {self._table} ({columns}) VALUES ({placeholders})", self._values(record))
            created = self._select_one(cur, int(cur.lastrowid))
            if created is None:
                raise RuntimeError(f"Inserted row {cur.lastrowid} vanished from {self._table}")
            return created

    def find_all(self) -> Sequence[Record]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{self._select_sql} ORDER BY {ID_COLUMN} ASC")
            return fetchall(cur)

    def find_by_id(self, record_id: str) -> Optional[Record]:
        pk = parse_record_id(record_id)
        if pk is None:
            return None

        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, pk)

    def update_by_id(self, record_id: str, record: Mapping[str, Any]) -> Optional[Record]:
        pk = parse_record_id(record_id)
        if pk is None:
            return None

        assignments = ", ".join(f"{quote_identifier(f)}=%s" for f in self._fields)

        with db_cursor(self._conn_factory) as (_, cur):
            # rowcount is 0 for an unchanged row, so existence is checked up front.
            if self._select_one(cur, pk, for_update=True) is None:
                return None

            cur.execute(f"UPDATE {self._table} SET {assignments} WHERE {ID_COLUMN}=%s", (*self._values(record), pk))
            return self._select_one(cur, pk)

    def delete_by_id(self, record_id: str) -> Optional[Record]:
        pk = parse_record_id(record_id)
        if pk is None:
            return None

        with db_cursor(self._conn_factory) as (_, cur):
            existing = self._select_one(cur, pk, for_update=True)
            if existing is None:
                return None

            cur.execute(f"DELETE FROM {self._table} WHERE {ID_COLUMN}=%s", (pk,))
            return existing
