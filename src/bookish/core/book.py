"""Catalogue and reading-tracking entities."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ReadingStatus(str, Enum):
    """Where a book sits on the user's shelves."""

    READING = "reading"
    COMPLETED = "completed"
    TO_READ = "toRead"
    DNF = "dnf"  # did not finish


@dataclass(frozen=True)
class Book:
    """A catalogue record.

    Attributes:
        id: Unique catalogue identifier.
        title: Display title.
        author: Author name as shown on the cover.
        cover_image: URL or path of the cover artwork.
        description: Blurb text.
        published_date: Publication date, ISO formatted.
        genres: Genre labels.
        page_count: Number of pages; 0 when unknown.
        average_rating: Aggregate rating across all readers.
        ratings_count: Number of ratings behind ``average_rating``.
    """

    id: str
    title: str
    author: str
    cover_image: str = ""
    description: str = ""
    published_date: str = ""
    genres: Tuple[str, ...] = ()
    page_count: int = 0
    average_rating: float = 0.0
    ratings_count: int = 0


@dataclass(frozen=True)
class Review:
    text: str
    contains_spoilers: bool
    created_at: str
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class UserBook:
    """A user's tracking record for exactly one catalogue book."""

    id: str
    book_id: str
    user_id: str
    status: ReadingStatus = ReadingStatus.TO_READ
    current_page: int = 0
    start_date: Optional[str] = None
    finish_date: Optional[str] = None
    rating: Optional[float] = None
    review: Optional[Review] = None
    notes: Tuple[str, ...] = field(default_factory=tuple)
    is_wishlisted: bool = False
