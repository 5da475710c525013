"""Service for the history of works that were given kudos."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from ao3nav.models.database import get_session
from ao3nav.models.kudos import KudosHistory


class KudosService:
    """Service for managing kudos history."""

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        if self._session is None:
            self._session = get_session()
        return self._session

    def add(self, work_id: str, date: int) -> KudosHistory:
        """Record kudos for a work, replacing any earlier entry for it.

        Args:
            work_id: The work identifier.
            date: When kudos were left, in epoch milliseconds.
        """
        entry = self.session.merge(KudosHistory(work_id=str(work_id), date=date))
        self.session.commit()
        return entry

    def get(self, work_id: str) -> KudosHistory | None:
        """Get the kudos entry for a work."""
        return self.session.get(KudosHistory, str(work_id))

    def delete(self, work_id: str) -> None:
        """Delete the kudos entry for a work, if any."""
        self.session.execute(delete(KudosHistory).where(KudosHistory.work_id == str(work_id)))
        self.session.commit()

    def delete_all(self) -> None:
        """Delete every kudos entry."""
        self.session.execute(delete(KudosHistory))
        self.session.commit()

    def get_all(self) -> Sequence[KudosHistory]:
        """Get all entries, newest first."""
        stmt = select(KudosHistory).order_by(KudosHistory.date.desc())
        return self.session.execute(stmt).scalars().all()

    def get_latest(self) -> KudosHistory | None:
        """Get the most recent entry."""
        stmt = select(KudosHistory).order_by(KudosHistory.date.desc()).limit(1)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_by_date_range(
        self, start: int, end: int, limit: int, offset: int = 0
    ) -> Sequence[KudosHistory]:
        """Get entries dated between ``start`` and ``end`` inclusive, newest first."""
        stmt = (
            select(KudosHistory)
            .where(KudosHistory.date.between(start, end))
            .order_by(KudosHistory.date.desc())
            .limit(limit)
            .offset(offset)
        )
        return self.session.execute(stmt).scalars().all()

    def count_by_date_range(self, start: int, end: int) -> int:
        """Count entries dated between ``start`` and ``end`` inclusive."""
        stmt = (
            select(func.count())
            .select_from(KudosHistory)
            .where(KudosHistory.date.between(start, end))
        )
        return self.session.execute(stmt).scalar_one()

    def get_paginated(self, limit: int, offset: int = 0) -> Sequence[KudosHistory]:
        """Get one page of entries, newest first."""
        stmt = (
            select(KudosHistory)
            .order_by(KudosHistory.date.desc())
            .limit(limit)
            .offset(offset)
        )
        return self.session.execute(stmt).scalars().all()

    def total_count(self) -> int:
        """Count all entries."""
        stmt = select(func.count()).select_from(KudosHistory)
        return self.session.execute(stmt).scalar_one()

    def reading_dates(self) -> list[int]:
        """Get the distinct entry dates, newest first."""
        stmt = select(KudosHistory.date).distinct().order_by(KudosHistory.date.desc())
        return list(self.session.execute(stmt).scalars().all())
