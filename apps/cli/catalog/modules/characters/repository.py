from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from catalog.core.errors import StoreError, ValidationError
from catalog.core.observability import emit

from .fields import FieldDescriptor, field_names
from .models import Season
from .schemas import CharacterRecord, FieldValue
from .values import parse_season

TABLE = "characters"
COLUMNS = ("name", "birthday_season", "birthday_day", "is_bachelor", "best_gift")


class CharacterGateway(Protocol):
    """
    Boundary through which command handlers read and write characters.
    Implementations raise StoreError for anything the store rejects.
    """

    def insert(self, record: CharacterRecord) -> None:
        ...

    def select_all(self) -> List[CharacterRecord]:
        ...

    def select_by_name(self, name: str) -> Optional[CharacterRecord]:
        ...

    def update_field(self, name: str, field: FieldDescriptor, value: FieldValue) -> int:
        ...

    def count(self) -> int:
        ...


def _row_to_character(row: Any) -> CharacterRecord:
    d = dict(row._mapping)
    return CharacterRecord(
        name=str(d["name"]),
        birthday_season=parse_season(str(d["birthday_season"])),
        birthday_day=int(d["birthday_day"]),
        is_bachelor=bool(d["is_bachelor"]),
        best_gift=str(d["best_gift"]),
    )


def _insert(conn: Connection, table: str, row: Dict[str, Any]) -> None:
    keys = [k for k in row.keys() if k in COLUMNS]
    keys.sort()
    sql = f"INSERT INTO {table} ({', '.join(keys)}) VALUES ({', '.join(':' + k for k in keys)})"
    conn.execute(text(sql), {k: row[k] for k in keys})


def _store_error(op: str, e: SQLAlchemyError, **extra: Any) -> StoreError:
    """Logged once, by whoever finally handles the StoreError."""
    code = "constraint_violation" if isinstance(e, IntegrityError) else "store_error"
    # DBAPI message only; the SQLAlchemy wrapper appends the statement and params
    reason = str(getattr(e, "orig", None) or e)
    return StoreError(reason, code=code, details={"op": op, "type": type(e).__name__, **extra})


class SqlCharacterRepository:
    """CharacterGateway over a SQLAlchemy engine (sqlite by default, MySQL via DB_* vars)."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def insert(self, record: CharacterRecord) -> None:
        try:
            with self.engine.begin() as conn:
                _insert(conn, TABLE, record.to_row())
        except SQLAlchemyError as e:
            raise _store_error("insert", e, name=record.name) from e

    def select_all(self) -> List[CharacterRecord]:
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(text(f"SELECT {', '.join(COLUMNS)} FROM {TABLE}")).fetchall()
        except SQLAlchemyError as e:
            raise _store_error("select_all", e) from e
        return [_row_to_character(r) for r in rows]

    def select_by_name(self, name: str) -> Optional[CharacterRecord]:
        try:
            with self.engine.connect() as conn:
                row = conn.execute(
                    text(f"SELECT {', '.join(COLUMNS)} FROM {TABLE} WHERE name = :name"),
                    {"name": name},
                ).fetchone()
        except SQLAlchemyError as e:
            raise _store_error("select_by_name", e, name=name) from e
        if not row:
            return None
        return _row_to_character(row)

    def update_field(self, name: str, field: FieldDescriptor, value: FieldValue) -> int:
        column = field.field_name
        if column not in field_names():
            raise ValidationError(f"Field {column!r} cannot be changed.", code="unknown_field")

        bound = value.value if isinstance(value, Season) else value
        try:
            with self.engine.begin() as conn:
                res = conn.execute(
                    text(f"UPDATE {TABLE} SET {column} = :value WHERE name = :name"),
                    {"value": bound, "name": name},
                )
                n = int(res.rowcount or 0)
        except SQLAlchemyError as e:
            raise _store_error("update_field", e, name=name, field=column) from e

        emit("info", "store.update", f"{column} updated", __name__, name=name, field=column, rows=n)
        return n

    def count(self) -> int:
        try:
            with self.engine.connect() as conn:
                return int(conn.execute(text(f"SELECT COUNT(1) FROM {TABLE}")).scalar_one())
        except SQLAlchemyError as e:
            raise _store_error("count", e) from e
