"""File-based key-value storage: one JSON document per key inside a directory."""

import logging
import os
import re
import tempfile
from pathlib import Path
from typing import List, Optional

from bookish.core import StorageError
from bookish.io.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"^[A-Za-z0-9_.-]+$")


class FileKeyValueStorage(KeyValueStorage):
    """
    Stores each key as ``<directory>/<key>.json``.

    Writes go to a temporary file in the same directory which then
    replaces the target, so a crash mid-write leaves the previous
    snapshot intact.
    """

    SUFFIX = ".json"

    def __init__(self, directory: Path):
        self.directory = Path(directory)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create storage directory {self.directory}: {e}") from e

    def load(self, key: str) -> Optional[bytes]:
        path = self._path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_bytes()
        except OSError as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def save(self, key: str, data: bytes) -> None:
        path = self._path_for(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as handle:
                handle.write(data)
            os.replace(tmp_name, path)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise StorageError(f"Failed to write {path}: {e}") from e
        logger.debug("Saved %d bytes to %s", len(data), path)

    def delete(self, key: str) -> None:
        path = self._path_for(key)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as e:
            raise StorageError(f"Failed to delete {path}: {e}") from e

    def keys(self) -> List[str]:
        return sorted(path.stem for path in self.directory.glob(f"*{self.SUFFIX}"))

    def _path_for(self, key: str) -> Path:
        if not _KEY_PATTERN.match(key):
            raise StorageError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}{self.SUFFIX}"
