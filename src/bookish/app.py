"""Composition root - builds the stores and the storage they persist to."""

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QThreadPool

from bookish.io import (
    CHALLENGES_CODEC,
    LIBRARY_CODEC,
    PREFERENCES_CODEC,
    SOCIAL_CODEC,
    FileKeyValueStorage,
    InMemoryKeyValueStorage,
    KeyValueStorage,
    SnapshotWriter,
    SqliteKeyValueStorage,
)
from bookish.io.seed_fixtures import (
    seed_challenges_state,
    seed_library_state,
    seed_preferences_state,
    seed_social_state,
)
from bookish.services import AppearanceQuery, SettingsManager
from bookish.stores import ChallengesStore, LibraryStore, PreferencesStore, SocialStore, load_or_seed
from bookish.stores.base_store import Clock

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Everything the UI layer needs, passed explicitly instead of living in globals."""

    user_id: str
    storage: KeyValueStorage
    writer: SnapshotWriter
    library: LibraryStore
    social: SocialStore
    challenges: ChallengesStore
    preferences: PreferencesStore

    def flush(self, timeout_ms: int = -1) -> bool:
        """Wait for background snapshot writes to finish."""
        return self.writer.wait_for_pending(timeout_ms)


def create_storage(settings: SettingsManager) -> KeyValueStorage:
    """Instantiate the configured storage backend.

    Raises:
        ValueError: if the configured backend is unknown.
        StorageError: if the backend cannot be opened.
    """
    backend = settings.get_storage_backend()
    if backend == "memory":
        return InMemoryKeyValueStorage()
    data_dir = settings.get_data_dir()
    if backend == "sqlite":
        data_dir.mkdir(parents=True, exist_ok=True)
        return SqliteKeyValueStorage(data_dir / "bookish.db")
    return FileKeyValueStorage(data_dir)


def create_context(
    settings: Optional[SettingsManager] = None,
    storage: Optional[KeyValueStorage] = None,
    thread_pool: Optional[QThreadPool] = None,
    appearance_query: Optional[AppearanceQuery] = None,
    clock: Optional[Clock] = None,
) -> AppContext:
    """
    Wire storage, rehydrate every store and return the context.

    Args:
        settings: Configuration source; defaults to a SettingsManager on the project .env.
        storage: Storage to use instead of the configured backend.
        thread_pool: Pool for background writes; None writes synchronously.
        appearance_query: OS dark-mode query for the ``system`` theme.
        clock: Timestamp source for actions; defaults to UTC now.
    """
    settings = settings or SettingsManager()
    if storage is None:
        storage = create_storage(settings)
    writer = SnapshotWriter(storage, thread_pool)

    context = AppContext(
        user_id=settings.get_user_id(),
        storage=storage,
        writer=writer,
        library=LibraryStore(load_or_seed(storage, LIBRARY_CODEC, seed_library_state), writer, clock),
        social=SocialStore(load_or_seed(storage, SOCIAL_CODEC, seed_social_state), writer, clock),
        challenges=ChallengesStore(
            load_or_seed(storage, CHALLENGES_CODEC, seed_challenges_state), writer, clock
        ),
        preferences=PreferencesStore(
            load_or_seed(storage, PREFERENCES_CODEC, seed_preferences_state),
            writer,
            clock,
            appearance_query=appearance_query,
        ),
    )
    logger.info(
        "Loaded %d books, %d tracked, %d feed items, %d challenges",
        len(context.library.books),
        len(context.library.user_books),
        len(context.social.feed),
        len(context.challenges.challenges),
    )
    return context
