"""Tests for background snapshot persistence."""

import logging
import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool

from bookish.core import StorageError
from bookish.io import InMemoryKeyValueStorage, PersistWorker, SnapshotWriter


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


class FailingStorage(InMemoryKeyValueStorage):
    def save(self, key, data):
        raise StorageError(f"disk full while writing {key}")


def test_snapshot_writer_fails_fast_on_none_storage():
    with pytest.raises(ValueError, match="KeyValueStorage must not be None"):
        SnapshotWriter(None)


def test_synchronous_write_without_thread_pool():
    storage = InMemoryKeyValueStorage()
    writer = SnapshotWriter(storage)
    writer.write("bookish-books", b"{}")
    assert storage.load("bookish-books") == b"{}"
    assert writer.wait_for_pending() is True


def test_synchronous_write_failure_is_logged_not_raised(caplog):
    writer = SnapshotWriter(FailingStorage())
    with caplog.at_level(logging.ERROR, logger="bookish.io.persist_workers"):
        writer.write("bookish-books", b"{}")
    assert "Failed to persist snapshot 'bookish-books'" in caplog.text


def test_background_write_through_thread_pool():
    ensure_qt_app()
    storage = InMemoryKeyValueStorage()
    pool = QThreadPool()
    writer = SnapshotWriter(storage, pool)

    for i in range(5):
        writer.write(f"key-{i}", str(i).encode())

    assert writer.wait_for_pending(5000) is True
    assert sorted(storage.keys()) == [f"key-{i}" for i in range(5)]


def test_latest_write_wins_for_same_key():
    ensure_qt_app()
    storage = InMemoryKeyValueStorage()
    pool = QThreadPool()
    pool.setMaxThreadCount(4)
    writer = SnapshotWriter(storage, pool)

    for i in range(50):
        writer.write("bookish-books", str(i).encode())

    assert writer.wait_for_pending(5000) is True
    assert storage.load("bookish-books") == b"49"


def test_worker_reports_success():
    ensure_qt_app()
    storage = InMemoryKeyValueStorage()
    worker = PersistWorker(storage, "bookish-theme", b"dark")
    worker.setAutoDelete(False)
    finished = []
    errors = []
    worker.signals.finished.connect(lambda key: finished.append(key))
    worker.signals.error.connect(lambda key, message: errors.append((key, message)))

    worker.run()

    assert storage.load("bookish-theme") == b"dark"
    assert finished == ["bookish-theme"]
    assert errors == []


def test_worker_reports_failure(caplog):
    ensure_qt_app()
    worker = PersistWorker(FailingStorage(), "bookish-theme", b"dark")
    worker.setAutoDelete(False)
    finished = []
    errors = []
    worker.signals.finished.connect(lambda key: finished.append(key))
    worker.signals.error.connect(lambda key, message: errors.append((key, message)))

    with caplog.at_level(logging.ERROR):
        worker.run()

    assert errors == [("bookish-theme", "disk full while writing bookish-theme")]
    assert finished == ["bookish-theme"]
    assert "Failed to persist snapshot" in caplog.text
