"""Social entities: feed items, book clubs, discussions and comments."""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple, Union


@dataclass(frozen=True)
class ReviewContent:
    KIND: ClassVar[str] = "review"

    book_id: str
    text: str = ""
    rating: Optional[float] = None


@dataclass(frozen=True)
class ProgressContent:
    KIND: ClassVar[str] = "progress"

    book_id: str
    progress: float = 0.0
    text: str = ""


@dataclass(frozen=True)
class ChallengeContent:
    KIND: ClassVar[str] = "challenge"

    challenge_id: str
    text: str = ""


@dataclass(frozen=True)
class BadgeContent:
    KIND: ClassVar[str] = "badge"

    badge_id: str
    text: str = ""


@dataclass(frozen=True)
class ClubContent:
    KIND: ClassVar[str] = "club"

    club_id: str
    text: str = ""


FeedContent = Union[ReviewContent, ProgressContent, ChallengeContent, BadgeContent, ClubContent]

FEED_CONTENT_TYPES = {
    content_type.KIND: content_type
    for content_type in (ReviewContent, ProgressContent, ChallengeContent, BadgeContent, ClubContent)
}


@dataclass(frozen=True)
class FeedItem:
    """One activity entry in the feed.

    ``other_likes`` counts likes from everyone except the viewer; the
    viewer's own like is carried by ``is_liked`` alone, so the two can
    never disagree.
    """

    id: str
    user_id: str
    username: str
    timestamp: str
    content: FeedContent
    user_image: Optional[str] = None
    other_likes: int = 0
    comments_count: int = 0
    is_liked: bool = False

    @property
    def kind(self) -> str:
        return self.content.KIND

    @property
    def likes_count(self) -> int:
        return self.other_likes + (1 if self.is_liked else 0)


@dataclass(frozen=True)
class BookClub:
    """A book club. Membership of the viewer lives in the social state's joined set."""

    id: str
    name: str
    description: str = ""
    cover_image: str = ""
    other_members: int = 0
    current_book_id: Optional[str] = None
    upcoming_book_ids: Tuple[str, ...] = ()
    is_private: bool = False
    created_by: str = ""
    created_at: str = ""


@dataclass(frozen=True)
class Discussion:
    id: str
    book_club_id: str
    title: str
    content: str = ""
    book_id: Optional[str] = None
    created_by: str = ""
    created_at: str = ""
    comments_count: int = 0
    likes_count: int = 0


@dataclass(frozen=True)
class Comment:
    id: str
    discussion_id: str
    content: str
    created_by: str = ""
    created_at: str = ""
    likes_count: int = 0
