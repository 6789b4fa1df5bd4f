"""SQLAlchemy table factory shared by every version log."""

from sqlalchemy import Column, DateTime, Index, Integer, MetaData, String, Table
from sqlalchemy.dialects.mssql import JSON as MSSQLJSON
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.types import JSON

from company_versions.domain.entities import LogTableDefinition

_log_json_type = (
    JSON(none_as_null=True)
    .with_variant(JSONB(none_as_null=True), "postgresql")
    .with_variant(MSSQLJSON(none_as_null=True), "mssql")
)


def build_log_table(definition: LogTableDefinition, metadata: MetaData) -> Table:
    """Create the log table described by ``definition`` inside ``metadata``."""

    dialect_options: dict[str, str] = {}
    if definition.row_format:
        dialect_options["mysql_row_format"] = definition.row_format

    indexes = [
        Index(index.name, *index.columns, unique=index.unique)
        for index in definition.indexes
    ]

    return Table(
        definition.table_name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("action", String(8), nullable=False),
        Column("logged_at", DateTime, nullable=False),
        Column("object_id", String(64), nullable=True),
        Column("object_class", String(191), nullable=False),
        Column("version", Integer, nullable=False),
        Column("data", _log_json_type, nullable=True),
        Column("username", String(191), nullable=True),
        *indexes,
        **dialect_options,
    )


__all__ = ["build_log_table"]
