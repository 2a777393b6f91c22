"""Tests for LibraryStore."""

import json

import pytest
from PySide6.QtCore import QCoreApplication

from bookish.core import Book, ReadingStatus, UserBook
from bookish.io import LIBRARY_CODEC, InMemoryKeyValueStorage, SnapshotWriter
from bookish.io.seed_fixtures import seed_library_state
from bookish.stores import LibraryStore, load_or_seed

NOW = "2024-05-01T10:00:00+00:00"


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


@pytest.fixture
def storage():
    return InMemoryKeyValueStorage()


@pytest.fixture
def store(storage):
    ensure_qt_app()
    return LibraryStore(seed_library_state(), writer=SnapshotWriter(storage), clock=lambda: NOW)


def stored_state(storage):
    return json.loads(storage.load(LIBRARY_CODEC.key).decode("utf-8"))["state"]


class TestDerivedViews:
    def test_shelves_follow_status(self, store):
        assert [ub.id for ub in store.currently_reading] == ["ub1"]
        assert [ub.id for ub in store.completed] == ["ub2"]
        assert [ub.id for ub in store.to_read] == ["ub3", "ub5"]
        assert [ub.id for ub in store.dnf] == ["ub4"]
        assert [ub.id for ub in store.wishlisted] == ["ub3"]

    def test_lookups(self, store):
        assert store.find_book("book1").id == "book1"
        assert store.find_book("missing") is None
        assert store.find_user_book("ub2").status is ReadingStatus.COMPLETED


class TestDispatch:
    def test_review_scenario_on_ub1(self, store, storage):
        changes = []
        store.state_changed.connect(lambda state: changes.append(state))

        assert store.add_review("ub1", "Loving it so far", 4) is True

        ub1 = store.find_user_book("ub1")
        assert ub1.rating == 4
        assert ub1.review.text == "Loving it so far"
        assert ub1.review.created_at == NOW
        assert ub1.review.contains_spoilers is False
        assert len(changes) == 1
        assert changes[0] is store.state

        persisted = next(ub for ub in stored_state(storage)["user_books"] if ub["id"] == "ub1")
        assert persisted["rating"] == 4
        assert persisted["review"]["text"] == "Loving it so far"

    def test_unknown_id_emits_action_failed_and_keeps_state(self, store, storage):
        failures = []
        changes = []
        store.action_failed.connect(lambda message: failures.append(message))
        store.state_changed.connect(lambda state: changes.append(state))
        before = store.state

        assert store.toggle_wishlist("ub404") is False

        assert store.state is before
        assert changes == []
        assert len(failures) == 1
        assert "ub404" in failures[0]
        assert storage.load(LIBRARY_CODEC.key) is None

    def test_progress_moves_to_read_book_onto_reading_shelf(self, store):
        assert store.update_reading_progress("ub5", 10) is True
        ub5 = store.find_user_book("ub5")
        assert ub5.status is ReadingStatus.READING
        assert ub5.start_date == NOW
        assert ub5.current_page == 10

    def test_negative_progress_is_rejected(self, store):
        assert store.update_reading_progress("ub1", -1) is False
        assert store.find_user_book("ub1").current_page == 156

    def test_status_accepts_string_values(self, store):
        assert store.update_reading_status("ub1", "completed") is True
        ub1 = store.find_user_book("ub1")
        assert ub1.status is ReadingStatus.COMPLETED
        assert ub1.finish_date == NOW

    def test_update_book_merges_fields(self, store):
        assert store.update_book("book1", page_count=400, title="New title") is True
        book = store.find_book("book1")
        assert (book.title, book.page_count) == ("New title", 400)

    def test_update_book_unknown_field_is_rejected(self, store):
        assert store.update_book("book1", colour="red") is False

    def test_notes_add_and_remove(self, store):
        assert store.add_note("ub1", "Great opening") is True
        assert store.find_user_book("ub1").notes[-1] == "Great opening"
        assert store.remove_note("ub1", 0) is True
        assert store.find_user_book("ub1").notes == ()
        assert store.remove_note("ub1", 0) is False

    def test_orphaned_user_book_is_added_and_logged(self, store, caplog):
        orphan = UserBook(id="ub9", book_id="book404", user_id="user1")
        assert store.add_user_book(orphan) is True
        assert store.find_user_book("ub9") == orphan
        assert "references unknown book book404" in caplog.text

    def test_duplicate_pair_is_rejected(self, store):
        assert store.add_user_book(UserBook(id="ub9", book_id="book1", user_id="user1")) is False

    def test_add_book_then_track_it(self, store):
        assert store.add_book(Book(id="book7", title="Piranesi", author="Susanna Clarke", page_count=272))
        assert store.add_user_book(UserBook(id="ub6", book_id="book7", user_id="user1"))
        assert store.find_user_book("ub6").status is ReadingStatus.TO_READ


def test_store_without_writer_does_not_persist():
    ensure_qt_app()
    store = LibraryStore(seed_library_state())
    assert store.toggle_wishlist("ub1") is True
    assert store.find_user_book("ub1").is_wishlisted is True


def test_empty_store_defaults():
    ensure_qt_app()
    store = LibraryStore()
    assert store.books == []
    assert store.user_books == []


class TestUpdateUserBook:
    def test_status_string_lands_on_the_right_shelf(self, store):
        assert store.update_user_book("ub3", status="completed") is True
        assert "ub3" in [ub.id for ub in store.completed]
        assert "ub3" not in [ub.id for ub in store.to_read]

    def test_second_record_for_a_tracked_book_is_rejected(self, store, storage):
        assert store.update_user_book("ub3", book_id="book1") is False
        pairs = {(ub.user_id, ub.book_id) for ub in store.user_books}
        assert len(pairs) == len(store.user_books)
        assert storage.load(LIBRARY_CODEC.key) is None

    def test_invalid_page_and_rating_are_rejected(self, store):
        assert store.update_user_book("ub1", current_page=-40, rating=11) is False
        ub1 = store.find_user_book("ub1")
        assert (ub1.current_page, ub1.rating) == (156, None)


def test_with_status_accepts_string_values(store):
    assert [ub.id for ub in store.with_status("reading")] == ["ub1"]


def test_snapshot_with_nulls_loads_into_a_working_store(storage):
    ensure_qt_app()
    storage.save(
        LIBRARY_CODEC.key,
        json.dumps(
            {
                "version": 1,
                "key": LIBRARY_CODEC.key,
                "state": {
                    "books": [{"id": "b", "title": "t", "author": "a"}],
                    "user_books": [{"id": "u", "book_id": "b", "user_id": "user1", "notes": None, "status": None}],
                },
            }
        ).encode("utf-8"),
    )
    store = LibraryStore(load_or_seed(storage, LIBRARY_CODEC, seed_library_state), writer=SnapshotWriter(storage))

    assert store.add_note("u", "hi") is True
    assert store.find_user_book("u").notes == ("hi",)
    assert [ub.id for ub in store.to_read] == ["u"]
