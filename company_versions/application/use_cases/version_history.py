"""Use cases for reading and restoring the company version log."""

import logging
from dataclasses import replace
from datetime import datetime

from sqlalchemy.orm import Session

from company_versions.domain.entities import (
    VERSIONED_FIELDS,
    Company,
    LogEntry,
    TrackedEntity,
)
from company_versions.infrastructure.repositories import (
    CompanyRepository,
    LogEntryRepository,
)
from company_versions.utils import ensure_app_timezone

logger = logging.getLogger(__name__)


def _repository(session: Session) -> LogEntryRepository:
    return LogEntryRepository(session, TrackedEntity.COMPANY)


def list_company_versions(session: Session, company_id: int) -> list[LogEntry]:
    """Return every logged revision of a company, newest first."""

    return _repository(session).list_for_object(company_id)


def get_company_version(session: Session, company_id: int, version: int) -> LogEntry:
    """Return one revision of a company or raise an error if it does not exist."""

    entry = _repository(session).get_version(company_id, version)
    if entry is None:
        raise ValueError("Company version not found")
    return entry


def list_company_versions_by_username(session: Session, username: str) -> list[LogEntry]:
    """Return the company revisions written by ``username``."""

    return _repository(session).list_by_username(username)


def list_company_versions_logged_between(
    session: Session, *, start: datetime | None = None, end: datetime | None = None
) -> list[LogEntry]:
    """Return the company revisions logged within the inclusive range."""

    if (
        start is not None
        and end is not None
        and ensure_app_timezone(start) > ensure_app_timezone(end)
    ):
        raise ValueError("The start of the range must not be after its end")
    return _repository(session).list_logged_between(start, end)


def revert_company(
    session: Session,
    company_id: int,
    version: int,
    *,
    username: str | None = None,
) -> Company:
    """Restore the versioned fields of a company as they were at ``version``.

    The restored state is saved as a new ``update`` revision, so the log keeps
    growing and the reverted-from versions remain available.
    """

    repository = CompanyRepository(session)
    company = repository.get(company_id)
    if company is None:
        raise ValueError("Company not found")

    entries = _repository(session).list_up_to_version(company_id, version)
    if not entries or entries[-1].version != version:
        raise ValueError("Company version not found")

    values = company.versioned_values()
    for entry in entries:
        if entry.data is None:
            continue
        values.update(
            {field: entry.data[field] for field in VERSIONED_FIELDS if field in entry.data}
        )

    logger.info("Reverting company %s to version %s", company_id, version)
    return repository.update(replace(company, **values), username=username)


__all__ = [
    "get_company_version",
    "list_company_versions",
    "list_company_versions_by_username",
    "list_company_versions_logged_between",
    "revert_company",
]
