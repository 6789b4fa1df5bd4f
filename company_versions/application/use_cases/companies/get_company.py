"""Use case for retrieving a single company."""

from sqlalchemy.orm import Session

from company_versions.domain.entities import Company
from company_versions.infrastructure.repositories import CompanyRepository


def get_company(session: Session, company_id: int) -> Company:
    """Return the requested company or raise an error if it does not exist."""

    company = CompanyRepository(session).get(company_id)
    if company is None:
        raise ValueError("Company not found")
    return company
