"""Background snapshot persistence using Qt threading."""

import logging
import threading
from typing import Callable, Dict, Optional

from PySide6.QtCore import QObject, QRunnable, QThreadPool, Signal, Slot

from bookish.core import StorageError
from bookish.io.key_value_storage import KeyValueStorage

logger = logging.getLogger(__name__)


class PersistSignals(QObject):
    """
    Signals for reporting the outcome of a write.

    QRunnable doesn't inherit from QObject, so a separate QObject
    holds the signals.
    """
    finished = Signal(str)  # storage key
    error = Signal(str, str)  # storage key, message


class PersistWorker(QRunnable):
    """
    Writes one encoded snapshot to storage from a thread-pool thread.

    Failures are logged and reported through ``signals.error``; the
    in-memory state remains the source of truth either way.
    """

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str,
        data: bytes,
        save: Optional[Callable[[str, bytes], None]] = None,
    ):
        super().__init__()
        self.storage = storage
        self.key = key
        self.data = data
        self._save = save or storage.save
        self.signals = PersistSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        try:
            self._save(self.key, self.data)
        except Exception as e:
            # Thread boundary: nothing above us can handle it
            logger.exception("Failed to persist snapshot %r", self.key)
            self.signals.error.emit(self.key, str(e))
        finally:
            self.signals.finished.emit(self.key)


class SnapshotWriter:
    """Mirrors encoded snapshots to storage.

    With a thread pool the write is fire-and-forget on a pool thread.
    Without one it happens synchronously in the caller.

    Pool threads may pick writes up out of order, so each write carries a
    per-key sequence number and a write that is no longer the latest for
    its key is dropped.
    """

    def __init__(self, storage: KeyValueStorage, thread_pool: Optional[QThreadPool] = None):
        if storage is None:
            raise ValueError("KeyValueStorage must not be None")
        self.storage = storage
        self.thread_pool = thread_pool
        self._lock = threading.Lock()
        self._sequence = 0
        self._latest: Dict[str, int] = {}

    def write(self, key: str, data: bytes) -> None:
        if self.thread_pool is None:
            try:
                self.storage.save(key, data)
            except StorageError:
                logger.exception("Failed to persist snapshot %r", key)
            return

        with self._lock:
            self._sequence += 1
            sequence = self._sequence
            self._latest[key] = sequence

        def save_if_latest(k: str, d: bytes) -> None:
            with self._lock:
                if self._latest.get(k) != sequence:
                    logger.debug("Skipping superseded snapshot %r", k)
                    return
                self.storage.save(k, d)

        self.thread_pool.start(PersistWorker(self.storage, key, data, save_if_latest))

    def wait_for_pending(self, timeout_ms: int = -1) -> bool:
        """Block until queued writes finish. Returns False on timeout."""
        if self.thread_pool is None:
            return True
        return self.thread_pool.waitForDone(timeout_ms)
