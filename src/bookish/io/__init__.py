"""I/O layer - key-value persistence, snapshot encoding and seed fixtures."""

from .file_storage import FileKeyValueStorage
from .in_memory_storage import InMemoryKeyValueStorage
from .key_value_storage import KeyValueStorage
from .persist_workers import PersistSignals, PersistWorker, SnapshotWriter
from .snapshot_codec import (
    CHALLENGES_CODEC,
    LIBRARY_CODEC,
    PREFERENCES_CODEC,
    SNAPSHOT_VERSION,
    SOCIAL_CODEC,
    SnapshotCodec,
    SnapshotDecodeError,
)
from .sqlite_storage import SqliteKeyValueStorage

__all__ = [
    "KeyValueStorage",
    "InMemoryKeyValueStorage",
    "FileKeyValueStorage",
    "SqliteKeyValueStorage",
    "PersistSignals",
    "PersistWorker",
    "SnapshotWriter",
    "SnapshotCodec",
    "SnapshotDecodeError",
    "SNAPSHOT_VERSION",
    "LIBRARY_CODEC",
    "SOCIAL_CODEC",
    "CHALLENGES_CODEC",
    "PREFERENCES_CODEC",
]
