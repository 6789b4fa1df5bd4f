"""Declarative description of the per-type version log tables."""

from dataclasses import dataclass

from .log_entry import TrackedEntity


@dataclass(frozen=True)
class IndexDefinition:
    """Named index over an ordered set of log columns."""

    name: str
    columns: tuple[str, ...]
    unique: bool = False


@dataclass(frozen=True)
class LogTableDefinition:
    """Table name, storage hint and index set selected by a tracked type."""

    tracked: TrackedEntity
    table_name: str
    indexes: tuple[IndexDefinition, ...]
    row_format: str | None = "DYNAMIC"


LOG_INDEXES: tuple[IndexDefinition, ...] = (
    IndexDefinition("log_class_lookup_idx", ("object_class",)),
    IndexDefinition("log_date_lookup_idx", ("logged_at",)),
    IndexDefinition("log_user_lookup_idx", ("username",)),
    IndexDefinition(
        "log_version_lookup_idx",
        ("object_id", "object_class", "version"),
        unique=True,
    ),
)

COMPANY_VERSION_TABLE = LogTableDefinition(
    tracked=TrackedEntity.COMPANY,
    table_name="company_version",
    indexes=LOG_INDEXES,
)

LOG_TABLES: dict[TrackedEntity, LogTableDefinition] = {
    COMPANY_VERSION_TABLE.tracked: COMPANY_VERSION_TABLE,
}


def get_log_table_definition(tracked: TrackedEntity) -> LogTableDefinition:
    """Return the log table configuration registered for ``tracked``."""

    try:
        return LOG_TABLES[tracked]
    except KeyError as exc:
        raise ValueError(f"No version log is configured for {tracked.value}") from exc


__all__ = [
    "COMPANY_VERSION_TABLE",
    "IndexDefinition",
    "LOG_INDEXES",
    "LOG_TABLES",
    "LogTableDefinition",
    "get_log_table_definition",
]
