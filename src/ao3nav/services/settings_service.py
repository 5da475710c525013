"""Service for reading and saving application settings."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ao3nav.models.database import get_session
from ao3nav.models.settings import SETTINGS_ROW_ID, Settings, SettingsRecord

logger = logging.getLogger(__name__)


class SettingsService:
    """Service for the persisted settings row."""

    def __init__(self, session: Session | None = None) -> None:
        self._session = session

    @property
    def session(self) -> Session:
        """Get the database session."""
        if self._session is None:
            self._session = get_session()
        return self._session

    def get_settings(self) -> Settings:
        """Read the settings row.

        Returns:
            The stored settings, or defaults when no row exists or the
            database cannot be read.
        """
        try:
            record = self.session.get(SettingsRecord, SETTINGS_ROW_ID)
        except SQLAlchemyError:
            logger.exception("Error reading settings, using defaults")
            self.session.rollback()
            return Settings()
        if record is None:
            return Settings()
        return Settings.from_record(record)

    def save_settings(self, settings: Settings) -> None:
        """Insert or fully replace the settings row with the same id.

        Raises:
            SQLAlchemyError: If the write fails.
        """
        try:
            self.session.merge(settings.to_record())
            self.session.commit()
        except SQLAlchemyError:
            logger.exception("Error saving settings")
            self.session.rollback()
            raise
