"""State store base - holds one snapshot, applies actions, notifies and persists."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal

from bookish.core import BookishError
from bookish.io import SnapshotCodec, SnapshotWriter

logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Any, str], Any]
Clock = Callable[[], str]


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class StateStore(QObject):
    """Owns the current snapshot of one domain and the actions on it.

    Every action runs the pure reducer to completion. On success the new
    snapshot replaces the old one, ``state_changed`` fires and the encoded
    snapshot is handed to the writer. A rejected action (any BookishError)
    leaves the snapshot untouched, is logged, and fires ``action_failed``.
    """

    state_changed = Signal(object)
    action_failed = Signal(str)

    def __init__(
        self,
        name: str,
        reducer: Reducer,
        codec: SnapshotCodec,
        initial_state: Any,
        writer: Optional[SnapshotWriter] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__()

        if reducer is None:
            raise ValueError("Reducer must not be None")
        if codec is None:
            raise ValueError("SnapshotCodec must not be None")
        if initial_state is None:
            raise ValueError("Initial state must not be None")

        self.name = name
        self._reducer = reducer
        self._codec = codec
        self._state = initial_state
        self._writer = writer
        self._clock = clock or utc_now_iso

    @property
    def state(self) -> Any:
        return self._state

    def dispatch(self, action: Any) -> bool:
        """Apply an action. Returns True if it was accepted."""
        try:
            new_state = self._reducer(self._state, action, self._clock())
        except BookishError as e:
            logger.warning(
                "%s store rejected %s: %s",
                self.name,
                type(action).__name__,
                e,
                extra={"store": self.name, "action": type(action).__name__},
            )
            self.action_failed.emit(str(e))
            return False

        if new_state is self._state:
            return True

        self._state = new_state
        self.state_changed.emit(new_state)
        self.persist()
        return True

    def persist(self) -> None:
        """Mirror the current snapshot to storage (no-op without a writer)."""
        if self._writer is None:
            return
        self._writer.write(self._codec.key, self._codec.encode(self._state))
