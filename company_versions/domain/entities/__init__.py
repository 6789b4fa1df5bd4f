"""Domain entities exposed by the application."""

from .company import VERSIONED_FIELDS, Company
from .log_entry import LogAction, LogEntry, TrackedEntity
from .log_table import (
    COMPANY_VERSION_TABLE,
    LOG_INDEXES,
    LOG_TABLES,
    IndexDefinition,
    LogTableDefinition,
    get_log_table_definition,
)

__all__ = [
    "COMPANY_VERSION_TABLE",
    "Company",
    "IndexDefinition",
    "LOG_INDEXES",
    "LOG_TABLES",
    "LogAction",
    "LogEntry",
    "LogTableDefinition",
    "TrackedEntity",
    "VERSIONED_FIELDS",
    "get_log_table_definition",
]
