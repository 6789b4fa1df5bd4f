"""Persistence layer for companies and their version log."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.orm import Session

from company_versions.domain.entities import (
    VERSIONED_FIELDS,
    Company,
    LogAction,
    TrackedEntity,
)
from company_versions.infrastructure.models import CompanyModel
from company_versions.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

from .log_entry_repository import LogEntryRepository

logger = logging.getLogger(__name__)


class CompanyRepository:
    """Provide CRUD operations for companies, logging one revision per mutation."""

    def __init__(self, session: Session) -> None:
        self.session = session
        self.log = LogEntryRepository(session, TrackedEntity.COMPANY)

    def list(self, skip: int = 0, limit: int = 100) -> Sequence[Company]:
        query = (
            self.session.query(CompanyModel)
            .order_by(CompanyModel.id)
            .offset(skip)
            .limit(limit)
        )
        return [self._to_entity(model) for model in query.all()]

    def get(self, company_id: int) -> Company | None:
        model = self.session.get(CompanyModel, company_id)
        return self._to_entity(model) if model else None

    def create(self, company: Company, *, username: str | None = None) -> Company:
        model = CompanyModel()
        self._apply_entity_to_model(model, company)
        model.created_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.flush()

        self.log.record(
            model.id,
            LogAction.CREATE,
            self._versioned_values(model),
            username=username,
        )
        self.session.commit()
        self.session.refresh(model)
        logger.info("Company %s created by %s", model.id, username or "-")
        return self._to_entity(model)

    def update(self, company: Company, *, username: str | None = None) -> Company:
        model = self.session.get(CompanyModel, company.id) if company.id is not None else None
        if not model:
            msg = f"Company with id {company.id} not found"
            raise ValueError(msg)

        current = self._versioned_values(model)
        changes = {
            field: value
            for field, value in company.versioned_values().items()
            if current[field] != value
        }
        if not changes:
            logger.debug("Company %s unchanged; no version recorded", model.id)
            return self._to_entity(model)

        self._apply_entity_to_model(model, company)
        model.updated_at = ensure_app_naive_datetime(now_in_app_timezone())
        self.session.add(model)
        self.session.flush()

        self.log.record(model.id, LogAction.UPDATE, changes, username=username)
        self.session.commit()
        self.session.refresh(model)
        logger.info(
            "Company %s updated by %s (%s)",
            model.id,
            username or "-",
            ", ".join(sorted(changes)),
        )
        return self._to_entity(model)

    def delete(self, company_id: int, *, username: str | None = None) -> None:
        model = self.session.get(CompanyModel, company_id)
        if not model:
            msg = f"Company with id {company_id} not found"
            raise ValueError(msg)

        self.log.record(model.id, LogAction.REMOVE, None, username=username)
        self.session.delete(model)
        self.session.commit()
        logger.info("Company %s removed by %s", company_id, username or "-")

    @staticmethod
    def _versioned_values(model: CompanyModel) -> dict[str, str | None]:
        return {field: getattr(model, field) for field in VERSIONED_FIELDS}

    @staticmethod
    def _to_entity(model: CompanyModel) -> Company:
        return Company(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            address=model.address,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _apply_entity_to_model(model: CompanyModel, company: Company) -> None:
        model.name = company.name
        model.email = company.email
        model.phone = company.phone
        model.address = company.address


__all__ = ["CompanyRepository"]
