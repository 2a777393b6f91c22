"""Unit tests for snapshot encoding and decoding."""

import json

import pytest

from bookish.core import FeedItem, ProgressContent, ReadingStatus, ThemePreference
from bookish.io import (
    CHALLENGES_CODEC,
    LIBRARY_CODEC,
    PREFERENCES_CODEC,
    SNAPSHOT_VERSION,
    SOCIAL_CODEC,
    SnapshotDecodeError,
)
from bookish.io.seed_fixtures import (
    seed_challenges_state,
    seed_library_state,
    seed_social_state,
)
from bookish.reducers import PreferencesState


def envelope(key, state):
    return json.dumps({"version": SNAPSHOT_VERSION, "key": key, "state": state}).encode("utf-8")


class TestEncoding:
    def test_envelope_carries_version_and_key(self):
        data = json.loads(LIBRARY_CODEC.encode(seed_library_state()))
        assert data["version"] == SNAPSHOT_VERSION
        assert data["key"] == "bookish-books"
        assert {"books", "user_books"} <= set(data["state"])

    def test_enums_are_written_as_values(self):
        data = json.loads(LIBRARY_CODEC.encode(seed_library_state()))
        statuses = {ub["status"] for ub in data["state"]["user_books"]}
        assert statuses == {"reading", "completed", "toRead", "dnf"}

    def test_feed_content_is_tagged_with_its_kind(self):
        data = json.loads(SOCIAL_CODEC.encode(seed_social_state()))
        kinds = [item["content"]["type"] for item in data["state"]["feed"]]
        assert kinds == ["review", "progress", "challenge", "badge", "club"]

    def test_derived_counts_are_not_stored(self):
        data = json.loads(CHALLENGES_CODEC.encode(seed_challenges_state()))
        event = data["state"]["events"][0]
        assert "participants_count" not in event
        assert "is_completed" not in data["state"]["challenges"][0]


class TestDecoding:
    @pytest.mark.parametrize(
        "codec, seed",
        [
            (LIBRARY_CODEC, seed_library_state),
            (SOCIAL_CODEC, seed_social_state),
            (CHALLENGES_CODEC, seed_challenges_state),
            (PREFERENCES_CODEC, PreferencesState),
        ],
    )
    def test_decode_restores_encoded_state(self, codec, seed):
        state = seed()
        assert codec.decode(codec.encode(state)) == state

    def test_missing_optional_fields_use_defaults(self):
        data = envelope(
            "bookish-books",
            {
                "books": [{"id": "b1", "title": "Dune", "author": "Frank Herbert"}],
                "user_books": [{"id": "ub1", "book_id": "b1", "user_id": "user1"}],
            },
        )
        state = LIBRARY_CODEC.decode(data)
        assert state.books[0].page_count == 0
        assert state.user_books[0].status is ReadingStatus.TO_READ
        assert state.user_books[0].notes == ()
        assert state.user_books[0].review is None

    def test_null_for_non_optional_fields_uses_defaults(self):
        data = envelope(
            "bookish-books",
            {
                "books": [{"id": "b1", "title": "Dune", "author": "Frank Herbert", "genres": None}],
                "user_books": [
                    {"id": "u", "book_id": "b1", "user_id": "user1", "status": None, "notes": None, "rating": None}
                ],
            },
        )
        state = LIBRARY_CODEC.decode(data)
        assert state.books[0].genres == ()
        record = state.user_books[0]
        assert record.status is ReadingStatus.TO_READ
        assert record.notes == ()
        assert record.rating is None

    def test_null_collections_default_to_empty(self):
        data = envelope(
            "bookish-social",
            {"book_clubs": [{"id": "c1", "name": "Club", "upcoming_book_ids": None}], "comments": None},
        )
        state = SOCIAL_CODEC.decode(data)
        assert state.book_clubs[0].upcoming_book_ids == ()
        assert state.comments == ()

    def test_missing_collections_default_to_empty(self):
        state = SOCIAL_CODEC.decode(envelope("bookish-social", {"feed": []}))
        assert state.book_clubs == ()
        assert state.joined_book_club_ids == ()

    def test_unknown_fields_are_ignored(self):
        data = envelope("bookish-theme", {"theme": "dark", "font_size": 14})
        assert PREFERENCES_CODEC.decode(data).theme is ThemePreference.DARK

    def test_feed_content_variant_restored(self):
        data = envelope(
            "bookish-social",
            {
                "feed": [
                    {
                        "id": "f1",
                        "user_id": "u",
                        "username": "n",
                        "timestamp": "t",
                        "content": {"type": "progress", "book_id": "b1", "progress": 0.3},
                    }
                ]
            },
        )
        item = SOCIAL_CODEC.decode(data).feed[0]
        assert isinstance(item, FeedItem)
        assert item.content == ProgressContent(book_id="b1", progress=0.3)


class TestDecodeErrors:
    def test_invalid_json(self):
        with pytest.raises(SnapshotDecodeError, match="not valid JSON"):
            LIBRARY_CODEC.decode(b"{not json")

    def test_unsupported_version(self):
        data = json.dumps({"version": 99, "key": "bookish-books", "state": {}}).encode()
        with pytest.raises(SnapshotDecodeError, match="Unsupported snapshot version 99"):
            LIBRARY_CODEC.decode(data)

    def test_legacy_document_without_envelope(self):
        data = json.dumps({"books": [], "userBooks": []}).encode()
        with pytest.raises(SnapshotDecodeError, match="version"):
            LIBRARY_CODEC.decode(data)

    def test_key_mismatch(self):
        with pytest.raises(SnapshotDecodeError, match="key mismatch"):
            LIBRARY_CODEC.decode(envelope("bookish-social", {}))

    def test_unknown_feed_content_type(self):
        data = envelope(
            "bookish-social",
            {"feed": [{"id": "f", "user_id": "u", "username": "n", "timestamp": "t", "content": {"type": "poll"}}]},
        )
        with pytest.raises(SnapshotDecodeError, match="poll"):
            SOCIAL_CODEC.decode(data)

    def test_record_missing_required_field(self):
        data = envelope("bookish-books", {"books": [{"id": "b1"}]})
        with pytest.raises(SnapshotDecodeError, match="Invalid Book record"):
            LIBRARY_CODEC.decode(data)

    def test_null_required_field(self):
        data = envelope("bookish-books", {"books": [{"id": "b1", "title": None, "author": "x"}]})
        with pytest.raises(SnapshotDecodeError, match="Book.title is required"):
            LIBRARY_CODEC.decode(data)

    def test_bad_enum_value(self):
        data = envelope("bookish-theme", {"theme": "sepia"})
        with pytest.raises(SnapshotDecodeError):
            PREFERENCES_CODEC.decode(data)
