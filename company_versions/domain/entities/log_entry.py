"""Domain entity representing one revision of a tracked object."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class LogAction(str, Enum):
    """Kind of mutation captured by a log entry."""

    CREATE = "create"
    UPDATE = "update"
    REMOVE = "remove"


class TrackedEntity(str, Enum):
    """Object classes whose mutations are written to a version log."""

    COMPANY = "Company"


@dataclass(frozen=True)
class LogEntry:
    """Immutable revision record of a tracked object."""

    id: int | None
    action: LogAction
    logged_at: datetime | None
    object_id: str | None
    object_class: str
    version: int
    data: Mapping[str, Any] | None
    username: str | None


__all__ = ["LogAction", "LogEntry", "TrackedEntity"]
