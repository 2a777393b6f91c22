"""Key-value storage abstraction - the persistence port every store writes through."""

from abc import ABC, abstractmethod
from typing import List, Optional


class KeyValueStorage(ABC):
    """
    Abstract durable byte store.

    Each state store serializes its whole snapshot under a single key.
    Implementations (InMemoryKeyValueStorage, FileKeyValueStorage,
    SqliteKeyValueStorage) handle the storage details and raise
    StorageError when the medium fails.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[bytes]:
        """
        Read the bytes stored under ``key``.

        Returns:
            The stored bytes, or None if nothing was saved under that key.
        """
        pass

    @abstractmethod
    def save(self, key: str, data: bytes) -> None:
        """Store ``data`` under ``key``, replacing any previous value."""
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys. Useful for diagnostics and testing."""
        pass
