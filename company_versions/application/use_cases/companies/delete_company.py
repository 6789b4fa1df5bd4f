"""Use case for removing companies."""

from sqlalchemy.orm import Session

from company_versions.infrastructure.repositories import CompanyRepository


def delete_company(session: Session, company_id: int, *, username: str | None = None) -> None:
    """Remove a company, recording the removal in its version log."""

    repository = CompanyRepository(session)
    if repository.get(company_id) is None:
        raise ValueError("Company not found")
    repository.delete(company_id, username=username)
