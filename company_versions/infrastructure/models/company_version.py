"""SQLAlchemy model for the company version log."""

from company_versions.domain.entities import COMPANY_VERSION_TABLE
from company_versions.infrastructure.database import Base

from .log_entry import build_log_table


class CompanyVersionModel(Base):
    """Database representation of one company revision."""

    __table__ = build_log_table(COMPANY_VERSION_TABLE, Base.metadata)


__all__ = ["CompanyVersionModel"]
