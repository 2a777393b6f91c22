"""In-memory key-value storage for tests and throwaway sessions."""

from typing import Dict, List, Optional

from bookish.io.key_value_storage import KeyValueStorage


class InMemoryKeyValueStorage(KeyValueStorage):
    """
    Dictionary-backed storage. No persistence across processes.
    """

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self._store: Dict[str, bytes] = dict(initial or {})

    def load(self, key: str) -> Optional[bytes]:
        return self._store.get(key)

    def save(self, key: str, data: bytes) -> None:
        self._store[key] = bytes(data)

    def delete(self, key: str) -> None:
        self._store.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._store.keys())
