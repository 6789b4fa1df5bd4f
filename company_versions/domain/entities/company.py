"""Domain entity representing a company."""

from dataclasses import dataclass
from datetime import datetime
from typing import Final

VERSIONED_FIELDS: Final[tuple[str, ...]] = ("name", "email", "phone", "address")


@dataclass
class Company:
    """Business entity whose changes are kept in the version log."""

    id: int | None
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime | None
    updated_at: datetime | None

    def versioned_values(self) -> dict[str, str | None]:
        """Return the values of the fields tracked by the version log."""

        return {field: getattr(self, field) for field in VERSIONED_FIELDS}


__all__ = ["Company", "VERSIONED_FIELDS"]
