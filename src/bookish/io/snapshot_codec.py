"""Snapshot codec - converts store states to versioned JSON bytes and back.

Format:
{
    "version": 1,
    "key": "bookish-books",
    "state": {
        "books": [...],
        "user_books": [...]
    }
}

Entity objects are written field by field with snake_case names. Optional
fields absent from a stored document fall back to the dataclass defaults,
so snapshots written before a field existed still load.
"""

import json
from dataclasses import MISSING, dataclass, fields, is_dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Type, TypeVar

from bookish.core import (
    FEED_CONTENT_TYPES,
    Badge,
    Book,
    BookClub,
    Comment,
    Discussion,
    Event,
    FeedItem,
    ReadingChallenge,
    ReadingStatus,
    Review,
    StorageError,
    ThemePreference,
    UserBook,
)
from bookish.reducers import ChallengesState, LibraryState, PreferencesState, SocialState

SNAPSHOT_VERSION = 1

T = TypeVar("T")


class SnapshotDecodeError(StorageError):
    """Raised when stored bytes cannot be turned back into a state."""


def to_plain(value: Any) -> Any:
    """Recursively convert dataclasses, enums and tuples into JSON-ready values."""
    if is_dataclass(value) and not isinstance(value, type):
        plain = {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
        kind = getattr(type(value), "KIND", None)
        if kind is not None:
            plain["type"] = kind
        return plain
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple)):
        return [to_plain(item) for item in value]
    if isinstance(value, dict):
        return {key: to_plain(item) for key, item in value.items()}
    return value


def build(cls: Type[T], data: Mapping[str, Any], **converters: Callable[[Any], Any]) -> T:
    """Instantiate ``cls`` from the known keys of ``data``, applying per-field converters."""
    if not isinstance(data, Mapping):
        raise SnapshotDecodeError(f"Expected an object for {cls.__name__}, got {type(data).__name__}")
    kwargs: Dict[str, Any] = {}
    try:
        for f in fields(cls):
            if f.name not in data:
                continue
            raw = data[f.name]
            if raw is None:
                if f.default is MISSING and f.default_factory is MISSING:
                    raise SnapshotDecodeError(f"{cls.__name__}.{f.name} is required but stored as null")
                if f.default is not None:
                    # null for a non-optional field reads as absent
                    continue
            converter = converters.get(f.name)
            kwargs[f.name] = converter(raw) if converter and raw is not None else raw
        return cls(**kwargs)
    except (TypeError, ValueError) as e:
        raise SnapshotDecodeError(f"Invalid {cls.__name__} record: {e}") from e


def _tuple_of(converter: Callable[[Any], T]) -> Callable[[Any], tuple]:
    return lambda items: tuple(converter(item) for item in items)


def decode_review(data: Mapping[str, Any]) -> Review:
    return build(Review, data)


def decode_book(data: Mapping[str, Any]) -> Book:
    return build(Book, data, genres=_tuple_of(str))


def decode_user_book(data: Mapping[str, Any]) -> UserBook:
    return build(
        UserBook,
        data,
        status=ReadingStatus,
        review=decode_review,
        notes=_tuple_of(str),
    )


def decode_feed_content(data: Mapping[str, Any]):
    kind = data.get("type") if isinstance(data, Mapping) else None
    content_type = FEED_CONTENT_TYPES.get(kind)
    if content_type is None:
        raise SnapshotDecodeError(f"Unknown feed content type: {kind!r}")
    return build(content_type, data)


def decode_feed_item(data: Mapping[str, Any]) -> FeedItem:
    return build(FeedItem, data, content=decode_feed_content)


def decode_book_club(data: Mapping[str, Any]) -> BookClub:
    return build(BookClub, data, upcoming_book_ids=_tuple_of(str))


def decode_library_state(data: Mapping[str, Any]) -> LibraryState:
    return build(
        LibraryState,
        data,
        books=_tuple_of(decode_book),
        user_books=_tuple_of(decode_user_book),
    )


def decode_social_state(data: Mapping[str, Any]) -> SocialState:
    return build(
        SocialState,
        data,
        feed=_tuple_of(decode_feed_item),
        book_clubs=_tuple_of(decode_book_club),
        joined_book_club_ids=_tuple_of(str),
        discussions=_tuple_of(lambda item: build(Discussion, item)),
        comments=_tuple_of(lambda item: build(Comment, item)),
    )


def decode_challenges_state(data: Mapping[str, Any]) -> ChallengesState:
    return build(
        ChallengesState,
        data,
        challenges=_tuple_of(lambda item: build(ReadingChallenge, item)),
        badges=_tuple_of(lambda item: build(Badge, item)),
        events=_tuple_of(lambda item: build(Event, item)),
    )


def decode_preferences_state(data: Mapping[str, Any]) -> PreferencesState:
    return build(PreferencesState, data, theme=ThemePreference)


@dataclass(frozen=True)
class SnapshotCodec:
    """Encodes one store's state under its storage key."""

    key: str
    decode_state: Callable[[Mapping[str, Any]], Any]
    encode_state: Callable[[Any], Any] = to_plain

    def encode(self, state: Any) -> bytes:
        envelope = {
            "version": SNAPSHOT_VERSION,
            "key": self.key,
            "state": self.encode_state(state),
        }
        return json.dumps(envelope, indent=2, ensure_ascii=False).encode("utf-8")

    def decode(self, data: bytes) -> Any:
        """
        Decode stored bytes into a state.

        Raises:
            SnapshotDecodeError: on malformed JSON, a foreign key, an
                unsupported version, or records that do not fit the entities.
        """
        try:
            envelope = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise SnapshotDecodeError(f"Snapshot for {self.key!r} is not valid JSON: {e}") from e
        if not isinstance(envelope, dict):
            raise SnapshotDecodeError(f"Snapshot for {self.key!r} is not an object")

        version = envelope.get("version")
        if version != SNAPSHOT_VERSION:
            raise SnapshotDecodeError(
                f"Unsupported snapshot version {version!r} for {self.key!r} (expected {SNAPSHOT_VERSION})"
            )
        if envelope.get("key", self.key) != self.key:
            raise SnapshotDecodeError(f"Snapshot key mismatch: {envelope.get('key')!r} != {self.key!r}")
        if "state" not in envelope:
            raise SnapshotDecodeError(f"Snapshot for {self.key!r} has no state")
        return self.decode_state(envelope["state"])


LIBRARY_KEY = "bookish-books"
SOCIAL_KEY = "bookish-social"
CHALLENGES_KEY = "bookish-challenges"
PREFERENCES_KEY = "bookish-theme"

LIBRARY_CODEC = SnapshotCodec(key=LIBRARY_KEY, decode_state=decode_library_state)
SOCIAL_CODEC = SnapshotCodec(key=SOCIAL_KEY, decode_state=decode_social_state)
CHALLENGES_CODEC = SnapshotCodec(key=CHALLENGES_KEY, decode_state=decode_challenges_state)
PREFERENCES_CODEC = SnapshotCodec(key=PREFERENCES_KEY, decode_state=decode_preferences_state)
