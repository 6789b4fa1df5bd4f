"""Use case for listing companies."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from company_versions.domain.entities import Company
from company_versions.infrastructure.repositories import CompanyRepository


def list_companies(session: Session, skip: int = 0, limit: int = 100) -> Sequence[Company]:
    return CompanyRepository(session).list(skip=skip, limit=limit)
