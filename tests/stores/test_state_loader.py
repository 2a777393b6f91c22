"""Tests for startup rehydration."""

from unittest.mock import MagicMock

from bookish.core import StorageError, ThemePreference
from bookish.io import PREFERENCES_CODEC, InMemoryKeyValueStorage
from bookish.reducers import PreferencesState
from bookish.stores import load_or_seed


def seed():
    return PreferencesState(ThemePreference.SYSTEM)


def test_missing_key_uses_seed():
    assert load_or_seed(InMemoryKeyValueStorage(), PREFERENCES_CODEC, seed) == seed()


def test_stored_snapshot_is_decoded():
    storage = InMemoryKeyValueStorage()
    storage.save(PREFERENCES_CODEC.key, PREFERENCES_CODEC.encode(PreferencesState(ThemePreference.DARK)))
    state = load_or_seed(storage, PREFERENCES_CODEC, seed)
    assert state.theme is ThemePreference.DARK


def test_corrupt_snapshot_falls_back_to_seed(caplog):
    storage = InMemoryKeyValueStorage()
    storage.save(PREFERENCES_CODEC.key, b"{not json")
    assert load_or_seed(storage, PREFERENCES_CODEC, seed) == seed()
    assert "Discarding snapshot 'bookish-theme'" in caplog.text


def test_unknown_version_falls_back_to_seed():
    storage = InMemoryKeyValueStorage()
    storage.save(PREFERENCES_CODEC.key, b'{"version": 99, "key": "bookish-theme", "state": {"theme": "dark"}}')
    assert load_or_seed(storage, PREFERENCES_CODEC, seed) == seed()


def test_storage_read_error_falls_back_to_seed(caplog):
    storage = MagicMock()
    storage.load.side_effect = StorageError("database is locked")
    assert load_or_seed(storage, PREFERENCES_CODEC, seed) == seed()
    assert "database is locked" in caplog.text
