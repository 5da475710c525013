"""Settings model for persisted application preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, Session, mapped_column

from ao3nav.models.database import Base

SETTINGS_ROW_ID = 1


class SettingsRecord(Base):
    """The single settings row. Booleans are stored as 0/1 integers."""

    __tablename__ = "settings"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    theme: Mapped[str] = mapped_column(String(50), default="light", server_default="light")
    is_incognito_mode: Mapped[int] = mapped_column(Integer, default=0, server_default="0")
    view_mode: Mapped[str] = mapped_column(String(50), default="full", server_default="full")
    font_size: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    use_custom_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<SettingsRecord(id={self.id}, theme={self.theme!r}, view_mode={self.view_mode!r})>"


@dataclass
class Settings:
    """Application settings as seen by callers."""

    id: int = SETTINGS_ROW_ID
    theme: str = "light"
    is_incognito_mode: bool = False
    view_mode: str = "full"
    font_size: float | None = 1.0
    use_custom_size: bool | None = False

    @classmethod
    def from_record(cls, record: SettingsRecord) -> Settings:
        return cls(
            id=record.id,
            theme=record.theme,
            is_incognito_mode=bool(record.is_incognito_mode),
            view_mode=record.view_mode,
            font_size=record.font_size,
            use_custom_size=(
                None if record.use_custom_size is None else bool(record.use_custom_size)
            ),
        )

    def to_record(self) -> SettingsRecord:
        return SettingsRecord(
            id=self.id,
            theme=self.theme,
            is_incognito_mode=1 if self.is_incognito_mode else 0,
            view_mode=self.view_mode,
            font_size=self.font_size,
            use_custom_size=None if self.use_custom_size is None else int(bool(self.use_custom_size)),
        )


def seed_default_settings(session: Session) -> None:
    """Insert the default settings row if it does not exist yet."""
    if session.get(SettingsRecord, SETTINGS_ROW_ID) is None:
        session.add(
            SettingsRecord(id=SETTINGS_ROW_ID, theme="light", is_incognito_mode=0, view_mode="full")
        )
        session.commit()
