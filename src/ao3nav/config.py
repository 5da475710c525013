"""Configuration management for ao3nav."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Default configuration directory
DEFAULT_CONFIG_DIR = Path.home() / ".config" / "ao3nav"
DEFAULT_DB_PATH = DEFAULT_CONFIG_DIR / "ao3nav.db"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"

# Archive of Our Own base URL
ARCHIVE_BASE_URL = "https://archiveofourown.org"
NAVIGATE_URL_TEMPLATE = f"{ARCHIVE_BASE_URL}/works/{{work_id}}/navigate"

# HTTP settings
DEFAULT_TIMEOUT = 30.0
MAX_CONCURRENT_FETCHES = 4

DEFAULT_LOG_LEVEL = "WARNING"


def navigate_url(work_id: str | int) -> str:
    """Build the chapter navigation page URL for a work.

    Args:
        work_id: The numeric work identifier.

    Returns:
        The absolute URL of the work's navigate page.
    """
    return NAVIGATE_URL_TEMPLATE.format(work_id=str(work_id).strip())


class Config:
    """Application configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        self.config_path = config_path or DEFAULT_CONFIG_PATH
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self) -> None:
        """Load configuration from file."""
        if self.config_path.exists():
            with open(self.config_path) as f:
                self._data = json.load(f)
        else:
            self._data = {}

    def _save(self) -> None:
        """Save configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w") as f:
            json.dump(self._data, f, indent=2)

    @property
    def db_path(self) -> Path:
        """Get the database path."""
        path_str = self._data.get("db_path")
        if path_str:
            return Path(path_str)
        return DEFAULT_DB_PATH

    @db_path.setter
    def db_path(self, value: Path) -> None:
        self._data["db_path"] = str(value)
        self._save()

    @property
    def timeout(self) -> float:
        """Get the HTTP timeout in seconds."""
        return float(self._data.get("timeout", DEFAULT_TIMEOUT))

    @timeout.setter
    def timeout(self, value: float) -> None:
        self._data["timeout"] = float(value)
        self._save()

    @property
    def log_level(self) -> str:
        """Get the log level name used by the command-line entry point."""
        return str(self._data.get("log_level", DEFAULT_LOG_LEVEL)).upper()

    @log_level.setter
    def log_level(self, value: str) -> None:
        self._data["log_level"] = value.upper()
        self._save()


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config
