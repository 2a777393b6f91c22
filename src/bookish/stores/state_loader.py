"""Startup rehydration of store snapshots."""

import logging
from typing import Callable, TypeVar

from bookish.core import StorageError
from bookish.io import KeyValueStorage, SnapshotCodec

logger = logging.getLogger(__name__)

S = TypeVar("S")


def load_or_seed(storage: KeyValueStorage, codec: SnapshotCodec, seed: Callable[[], S]) -> S:
    """Return the persisted snapshot for ``codec.key``, or fresh seed data.

    Seed data is used on first run, and also when the stored snapshot
    cannot be read or decoded (corrupt file, unknown schema version); the
    bad snapshot is overwritten on the next successful action.
    """
    try:
        data = storage.load(codec.key)
    except StorageError as e:
        logger.warning("Could not read %r, using seed data: %s", codec.key, e, extra={"storage_key": codec.key})
        return seed()

    if data is None:
        logger.info("No snapshot stored under %r, using seed data", codec.key)
        return seed()

    try:
        return codec.decode(data)
    except StorageError as e:
        logger.warning("Discarding snapshot %r: %s", codec.key, e, extra={"storage_key": codec.key})
        return seed()
