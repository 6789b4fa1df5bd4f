"""Schemas used to expose version log entries."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer

from company_versions.domain.entities import LogAction
from company_versions.utils import format_timestamp


class CompanyVersionRead(BaseModel):
    """Representation of a company revision ready for transmission."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action: LogAction
    logged_at: datetime | None
    object_id: str | None
    object_class: str
    version: int
    data: dict[str, Any] | None
    username: str | None

    @field_serializer("logged_at")
    def _serialize_logged_at(self, value: datetime | None) -> str | None:
        return format_timestamp(value)


class CompanyRead(BaseModel):
    """Representation of a company with UTC-formatted timestamps."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str | None
    phone: str | None
    address: str | None
    created_at: datetime | None
    updated_at: datetime | None

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamps(self, value: datetime | None) -> str | None:
        return format_timestamp(value)


__all__ = ["CompanyRead", "CompanyVersionRead"]
