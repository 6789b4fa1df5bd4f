"""Persistence layer for version log entries."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Iterable, Mapping

from sqlalchemy.orm import Query, Session

from company_versions.domain.entities import LogAction, LogEntry, TrackedEntity
from company_versions.infrastructure.models import LOG_MODELS
from company_versions.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)

logger = logging.getLogger(__name__)


class LogEntryRepository:
    """Write and query the version log of one tracked object class."""

    def __init__(
        self, session: Session, tracked: TrackedEntity = TrackedEntity.COMPANY
    ) -> None:
        self.session = session
        self.tracked = tracked
        try:
            self.model = LOG_MODELS[tracked]
        except KeyError as exc:
            raise ValueError(f"No version log is configured for {tracked.value}") from exc

    def record(
        self,
        object_id: str | int,
        action: LogAction,
        data: Mapping[str, Any] | None,
        *,
        username: str | None = None,
    ) -> LogEntry:
        """Append the next revision of ``object_id`` to the pending transaction.

        The caller owns the transaction: the row is flushed but not committed so
        it lands in the same commit as the mutation it describes.

        ``logged_at`` is stored as naive local time in the application timezone.
        In a zone with daylight saving time, rows written during the repeated
        hour after clocks go back are read back with ``fold=0`` and appear one
        hour early. Fixed-offset zones such as the default ``America/Bogota``
        are unaffected.
        """

        object_key = str(object_id)
        previous = self._latest_model(object_key)
        logged_at = ensure_app_naive_datetime(now_in_app_timezone())
        if previous is not None and previous.logged_at > logged_at:
            logged_at = previous.logged_at

        model = self.model()
        model.action = LogAction(action).value
        model.logged_at = logged_at
        model.object_id = object_key
        model.object_class = self.tracked.value
        model.version = (previous.version if previous is not None else 0) + 1
        model.data = dict(data) if data is not None else None
        model.username = username
        self.session.add(model)
        self.session.flush()

        logger.info(
            "Recorded %s version %s for %s #%s",
            model.action,
            model.version,
            self.tracked.value,
            object_key,
        )
        return self._to_entity(model)

    def latest_version(self, object_id: str | int) -> int:
        """Return the newest version number of ``object_id`` or ``0``."""

        model = self._latest_model(str(object_id))
        return model.version if model is not None else 0

    def get_version(self, object_id: str | int, version: int) -> LogEntry | None:
        """Return the entry for ``version`` of ``object_id``, if present."""

        model = (
            self._object_query(str(object_id))
            .filter(self.model.version == version)
            .one_or_none()
        )
        return self._to_entity(model) if model is not None else None

    def list_for_object(self, object_id: str | int) -> list[LogEntry]:
        """Return every revision of ``object_id``, newest first."""

        models = self._object_query(str(object_id)).order_by(self.model.version.desc())
        return self._to_entities(models)

    def list_up_to_version(self, object_id: str | int, version: int) -> list[LogEntry]:
        """Return the revisions of ``object_id`` up to ``version`` in ascending order."""

        models = (
            self._object_query(str(object_id))
            .filter(self.model.version <= version)
            .order_by(self.model.version)
        )
        return self._to_entities(models)

    def list_by_username(self, username: str) -> list[LogEntry]:
        """Return the revisions written by ``username`` in chronological order."""

        models = (
            self._class_query()
            .filter(self.model.username == username)
            .order_by(self.model.logged_at, self.model.id)
        )
        return self._to_entities(models)

    def list_logged_between(
        self, start: datetime | None = None, end: datetime | None = None
    ) -> list[LogEntry]:
        """Return the revisions logged within ``[start, end]``.

        Either bound may be omitted. Aware bounds are converted to the
        application timezone before comparison.
        """

        query = self._class_query()
        if start is not None:
            query = query.filter(self.model.logged_at >= ensure_app_naive_datetime(start))
        if end is not None:
            query = query.filter(self.model.logged_at <= ensure_app_naive_datetime(end))
        return self._to_entities(query.order_by(self.model.logged_at, self.model.id))

    def _class_query(self) -> Query:
        return self.session.query(self.model).filter(
            self.model.object_class == self.tracked.value
        )

    def _object_query(self, object_id: str) -> Query:
        return self._class_query().filter(self.model.object_id == object_id)

    def _latest_model(self, object_id: str):
        return (
            self._object_query(object_id)
            .order_by(self.model.version.desc())
            .first()
        )

    def _to_entities(self, models: Iterable) -> list[LogEntry]:
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model) -> LogEntry:
        return LogEntry(
            id=model.id,
            action=LogAction(model.action),
            logged_at=ensure_app_timezone(model.logged_at),
            object_id=model.object_id,
            object_class=model.object_class,
            version=model.version,
            data=dict(model.data) if model.data is not None else None,
            username=model.username,
        )


__all__ = ["LogEntryRepository"]
