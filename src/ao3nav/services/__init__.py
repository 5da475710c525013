"""Service layer for ao3nav."""

from ao3nav.services.chapter_service import ChapterService
from ao3nav.services.kudos_service import KudosService
from ao3nav.services.settings_service import SettingsService

__all__ = [
    "ChapterService",
    "KudosService",
    "SettingsService",
]
