"""Render the DDL generated for the version log tables."""

from __future__ import annotations

from typing import Callable

from sqlalchemy import Table
from sqlalchemy.dialects import mssql, mysql, postgresql, sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.schema import CreateIndex, CreateTable

_DIALECTS: dict[str, Callable[[], Dialect]] = {
    "mssql": mssql.dialect,
    "mysql": mysql.dialect,
    "postgresql": postgresql.dialect,
    "sqlite": sqlite.dialect,
}

SUPPORTED_DIALECTS = tuple(sorted(_DIALECTS))


def render_log_table_ddl(table: Table, dialect_name: str = "mysql") -> list[str]:
    """Return the CREATE TABLE and CREATE INDEX statements for ``table``."""

    try:
        dialect = _DIALECTS[dialect_name]()
    except KeyError as exc:
        raise ValueError(
            f"Unsupported dialect '{dialect_name}'. Choose one of: {', '.join(SUPPORTED_DIALECTS)}"
        ) from exc

    statements = [str(CreateTable(table).compile(dialect=dialect)).strip()]
    for index in sorted(table.indexes, key=lambda item: item.name or ""):
        statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip())
    return statements


__all__ = ["SUPPORTED_DIALECTS", "render_log_table_ddl"]
