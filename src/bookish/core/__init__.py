"""Domain layer - pure entities for the catalogue, social and challenge data."""

from .book import Book, ReadingStatus, Review, UserBook
from .challenges import Badge, Event, ReadingChallenge
from .errors import (
    BookishError,
    DuplicateEntityError,
    EntityNotFoundError,
    InvalidActionError,
    InvariantViolationError,
    StorageError,
)
from .social import (
    FEED_CONTENT_TYPES,
    BadgeContent,
    BookClub,
    ChallengeContent,
    ClubContent,
    Comment,
    Discussion,
    FeedContent,
    FeedItem,
    ProgressContent,
    ReviewContent,
)
from .theme import DARK_PALETTE, LIGHT_PALETTE, STATUS_COLORS, Palette, ThemePreference, palette_for

__all__ = [
    "Book",
    "ReadingStatus",
    "Review",
    "UserBook",
    "Badge",
    "Event",
    "ReadingChallenge",
    "BookishError",
    "DuplicateEntityError",
    "EntityNotFoundError",
    "InvalidActionError",
    "InvariantViolationError",
    "StorageError",
    "FEED_CONTENT_TYPES",
    "BadgeContent",
    "BookClub",
    "ChallengeContent",
    "ClubContent",
    "Comment",
    "Discussion",
    "FeedContent",
    "FeedItem",
    "ProgressContent",
    "ReviewContent",
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "STATUS_COLORS",
    "Palette",
    "ThemePreference",
    "palette_for",
]
