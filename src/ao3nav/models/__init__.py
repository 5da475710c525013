"""Database models for ao3nav."""

from ao3nav.models.database import Base, get_engine, get_session, init_db
from ao3nav.models.kudos import KudosHistory
from ao3nav.models.settings import Settings, SettingsRecord, seed_default_settings

__all__ = [
    "Base",
    "KudosHistory",
    "Settings",
    "SettingsRecord",
    "get_engine",
    "get_session",
    "init_db",
    "seed_default_settings",
]
