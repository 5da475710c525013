"""Kudos history model."""

from __future__ import annotations

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from ao3nav.models.database import Base


class KudosHistory(Base):
    """When kudos were left on a work. ``date`` is epoch milliseconds."""

    __tablename__ = "kudo_history"

    work_id: Mapped[str] = mapped_column(String(50), primary_key=True)
    date: Mapped[int] = mapped_column(BigInteger, nullable=False)

    def __repr__(self) -> str:
        return f"<KudosHistory(work_id={self.work_id!r}, date={self.date})>"
