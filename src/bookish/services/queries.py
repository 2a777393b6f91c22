"""Read-time joins across store snapshots.

Stores only hold ids for cross references. These helpers resolve them
for display and skip records whose reference no longer resolves.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from bookish.core import (
    Badge,
    BadgeContent,
    Book,
    BookClub,
    ChallengeContent,
    ClubContent,
    Comment,
    Discussion,
    FeedItem,
    ReadingChallenge,
    ReadingStatus,
    UserBook,
)
from bookish.reducers import ChallengesState, LibraryState, SocialState

FeedReference = Union[Book, ReadingChallenge, Badge, BookClub]


def find_by_id(items, entity_id: Optional[str]):
    if entity_id is None:
        return None
    return next((item for item in items if item.id == entity_id), None)


def library_entries(
    library: LibraryState, status: Union[ReadingStatus, str, None] = None
) -> List[Tuple[UserBook, Book]]:
    """Pair each tracking record with its book, optionally filtered by status.

    Records pointing at a book missing from the catalogue are left out.
    """
    entries = []
    for user_book in library.user_books:
        if status is not None and user_book.status != status:
            continue
        book = find_by_id(library.books, user_book.book_id)
        if book is not None:
            entries.append((user_book, book))
    return entries


def find_user_book_for_book(library: LibraryState, book_id: str, user_id: str) -> Optional[UserBook]:
    return next(
        (ub for ub in library.user_books if ub.book_id == book_id and ub.user_id == user_id),
        None,
    )


def progress_fraction(user_book: UserBook, book: Book) -> float:
    """Pages read over page count. Can exceed 1.0; 0.0 for unknown page counts."""
    if book.page_count <= 0:
        return 0.0
    return user_book.current_page / book.page_count


def display_percentage(user_book: UserBook, book: Book) -> int:
    """Rounded percentage clamped to 0-100 for progress bars."""
    return max(0, min(100, round(progress_fraction(user_book, book) * 100)))


def joined_book_clubs(social: SocialState) -> List[BookClub]:
    return [club for club in social.book_clubs if social.is_member(club.id)]


def club_discussions(social: SocialState, club_id: str) -> List[Discussion]:
    return [d for d in social.discussions if d.book_club_id == club_id]


def discussion_comments(social: SocialState, discussion_id: str) -> List[Comment]:
    return [c for c in social.comments if c.discussion_id == discussion_id]


@dataclass(frozen=True)
class FeedEntry:
    item: FeedItem
    reference: Optional[FeedReference]


def resolve_feed_item(
    item: FeedItem,
    library: LibraryState,
    social: SocialState,
    challenges: ChallengesState,
) -> FeedEntry:
    content = item.content
    if isinstance(content, ChallengeContent):
        reference = find_by_id(challenges.challenges, content.challenge_id)
    elif isinstance(content, BadgeContent):
        reference = find_by_id(challenges.badges, content.badge_id)
    elif isinstance(content, ClubContent):
        reference = find_by_id(social.book_clubs, content.club_id)
    else:
        # review and progress entries both point at a book
        reference = find_by_id(library.books, content.book_id)
    return FeedEntry(item=item, reference=reference)


def resolved_feed(
    library: LibraryState, social: SocialState, challenges: ChallengesState
) -> List[FeedEntry]:
    """Feed in stored order with references resolved; dangling entries dropped."""
    entries = (resolve_feed_item(item, library, social, challenges) for item in social.feed)
    return [entry for entry in entries if entry.reference is not None]


@dataclass(frozen=True)
class ProfileStats:
    completed_books: int
    unlocked_badges: int
    total_badges: int
    joined_book_clubs: int


def profile_stats(library: LibraryState, social: SocialState, challenges: ChallengesState) -> ProfileStats:
    return ProfileStats(
        completed_books=sum(1 for ub in library.user_books if ub.status == ReadingStatus.COMPLETED),
        unlocked_badges=sum(1 for badge in challenges.badges if badge.is_unlocked),
        total_badges=len(challenges.badges),
        joined_book_clubs=len(joined_book_clubs(social)),
    )
