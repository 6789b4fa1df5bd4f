"""Use case for creating companies."""

from sqlalchemy.orm import Session

from company_versions.domain.entities import Company
from company_versions.infrastructure.repositories import CompanyRepository


def create_company(
    session: Session,
    *,
    name: str,
    email: str | None = None,
    phone: str | None = None,
    address: str | None = None,
    username: str | None = None,
) -> Company:
    """Create a company and record its first version."""

    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Company name is required")

    company = Company(
        id=None,
        name=normalized_name,
        email=email,
        phone=phone,
        address=address,
        created_at=None,
        updated_at=None,
    )
    return CompanyRepository(session).create(company, username=username)
