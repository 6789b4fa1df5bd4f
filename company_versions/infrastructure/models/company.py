"""SQLAlchemy model for the company table."""

from sqlalchemy import Column, DateTime, Integer, String

from company_versions.infrastructure.database import Base


class CompanyModel(Base):
    """Database representation of a company."""

    __tablename__ = "company"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(180), nullable=True)
    phone = Column(String(32), nullable=True)
    address = Column(String(255), nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=True)


__all__ = ["CompanyModel"]
