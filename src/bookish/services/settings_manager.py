"""Settings Manager - Handles storage location and runtime configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

STORAGE_BACKENDS = ("file", "sqlite", "memory")


class SettingsManager:
    """
    Manages runtime configuration.

    Values come from the process environment, seeded from a .env file in
    the project root:

        BOOKISH_DATA_DIR         directory for persisted snapshots (~/.bookish)
        BOOKISH_STORAGE_BACKEND  file | sqlite | memory (file)
        BOOKISH_USER_ID          id of the local reader (user1)
        BOOKISH_LOG_LEVEL        logging level name (INFO)
        BOOKISH_LOG_FORMAT       text | json (text)
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_data_dir(self) -> Path:
        value = self._get("BOOKISH_DATA_DIR")
        return Path(value).expanduser() if value else Path.home() / ".bookish"

    def get_storage_backend(self) -> str:
        """Get the storage backend name.

        Raises:
            ValueError: if the configured backend is not supported.
        """
        backend = (self._get("BOOKISH_STORAGE_BACKEND") or "file").lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"Unsupported BOOKISH_STORAGE_BACKEND {backend!r}; expected one of {', '.join(STORAGE_BACKENDS)}"
            )
        return backend

    def get_user_id(self) -> str:
        return self._get("BOOKISH_USER_ID") or "user1"

    def get_log_level(self) -> str:
        return (self._get("BOOKISH_LOG_LEVEL") or "INFO").upper()

    def get_log_format(self) -> str:
        return (self._get("BOOKISH_LOG_FORMAT") or "text").lower()

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
