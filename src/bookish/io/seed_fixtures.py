"""First-run fixture data for every store.

Seed counts are given the way a reader sees them (total likes, members,
participants) and converted to the canonical ``other_*`` fields here.
"""

from typing import Optional

from bookish.core import (
    Badge,
    BadgeContent,
    Book,
    BookClub,
    ChallengeContent,
    ClubContent,
    Discussion,
    Event,
    FeedContent,
    FeedItem,
    ProgressContent,
    ReadingChallenge,
    ReadingStatus,
    ReviewContent,
    Review,
    UserBook,
)
from bookish.reducers import ChallengesState, LibraryState, PreferencesState, SocialState

DEFAULT_USER_ID = "user1"

JOINED_BOOK_CLUB_IDS = ("club1", "club2")

BOOKS = (
    Book(
        id="book1",
        title="The Midnight Library",
        author="Matt Haig",
        cover_image="https://images.example.com/covers/midnight-library.jpg",
        description="Between life and death there is a library, and within that library the shelves go on forever.",
        published_date="2020-08-13",
        genres=("Fiction", "Fantasy", "Contemporary"),
        page_count=304,
        average_rating=4.2,
        ratings_count=1245,
    ),
    Book(
        id="book2",
        title="Project Hail Mary",
        author="Andy Weir",
        cover_image="https://images.example.com/covers/project-hail-mary.jpg",
        description="A lone astronaut must save the earth from disaster.",
        published_date="2021-05-04",
        genres=("Science Fiction", "Adventure"),
        page_count=496,
        average_rating=4.5,
        ratings_count=2310,
    ),
    Book(
        id="book3",
        title="Pride and Prejudice",
        author="Jane Austen",
        cover_image="https://images.example.com/covers/pride-and-prejudice.jpg",
        description="The turbulent relationship between Elizabeth Bennet and Fitzwilliam Darcy.",
        published_date="1813-01-28",
        genres=("Classics", "Romance"),
        page_count=432,
        average_rating=4.3,
        ratings_count=3876,
    ),
    Book(
        id="book4",
        title="Klara and the Sun",
        author="Kazuo Ishiguro",
        cover_image="https://images.example.com/covers/klara-and-the-sun.jpg",
        description="An Artificial Friend observes the human world from a store window.",
        published_date="2021-03-02",
        genres=("Literary Fiction", "Science Fiction"),
        page_count=320,
        average_rating=3.9,
        ratings_count=987,
    ),
    Book(
        id="book5",
        title="The Name of the Wind",
        author="Patrick Rothfuss",
        cover_image="https://images.example.com/covers/name-of-the-wind.jpg",
        description="The tale of Kvothe, from his childhood in a troupe of traveling players to legend.",
        published_date="2007-03-27",
        genres=("Fantasy", "Epic Fantasy"),
        page_count=662,
        average_rating=4.5,
        ratings_count=3150,
    ),
    Book(
        id="book6",
        title="Educated",
        author="Tara Westover",
        cover_image="https://images.example.com/covers/educated.jpg",
        description="A memoir about a young woman who leaves her survivalist family and goes on to earn a PhD.",
        published_date="2018-02-20",
        genres=("Memoir", "Nonfiction"),
        page_count=352,
        average_rating=4.4,
        ratings_count=1899,
    ),
)

USER_BOOKS = (
    UserBook(
        id="ub1",
        book_id="book1",
        user_id=DEFAULT_USER_ID,
        status=ReadingStatus.READING,
        current_page=156,
        start_date="2023-03-10",
    ),
    UserBook(
        id="ub2",
        book_id="book2",
        user_id=DEFAULT_USER_ID,
        status=ReadingStatus.COMPLETED,
        current_page=496,
        start_date="2023-01-05",
        finish_date="2023-01-28",
        rating=5,
        review=Review(
            text="A page-turner with real heart. Rocky is the best character in years.",
            contains_spoilers=False,
            created_at="2023-01-29",
        ),
        notes=("Reread the chapter on the Petrova line.",),
    ),
    UserBook(
        id="ub3",
        book_id="book3",
        user_id=DEFAULT_USER_ID,
        status=ReadingStatus.TO_READ,
        is_wishlisted=True,
    ),
    UserBook(
        id="ub4",
        book_id="book4",
        user_id=DEFAULT_USER_ID,
        status=ReadingStatus.DNF,
        current_page=87,
        start_date="2023-02-01",
    ),
    UserBook(
        id="ub5",
        book_id="book5",
        user_id=DEFAULT_USER_ID,
        status=ReadingStatus.TO_READ,
    ),
)


def _feed_item(
    item_id: str,
    user_id: str,
    username: str,
    timestamp: str,
    content: FeedContent,
    likes_count: int,
    comments_count: int,
    is_liked: bool,
    user_image: Optional[str] = None,
) -> FeedItem:
    return FeedItem(
        id=item_id,
        user_id=user_id,
        username=username,
        user_image=user_image,
        timestamp=timestamp,
        content=content,
        other_likes=likes_count - (1 if is_liked else 0),
        comments_count=comments_count,
        is_liked=is_liked,
    )


FEED = (
    _feed_item(
        "feed1", "user2", "literary_sophie", "2023-04-10T14:30:00Z",
        ReviewContent(book_id="book3", text="Still the sharpest social comedy ever written.", rating=5),
        likes_count=24, comments_count=5, is_liked=True,
    ),
    _feed_item(
        "feed2", "user3", "bookish_maya", "2023-04-09T20:15:00Z",
        ProgressContent(book_id="book5", progress=0.45, text="Kvothe at the University at last!"),
        likes_count=12, comments_count=2, is_liked=False,
    ),
    _feed_item(
        "feed3", "user4", "readwithlaura", "2023-04-08T09:00:00Z",
        ChallengeContent(challenge_id="challenge1", text="Halfway through my yearly goal."),
        likes_count=31, comments_count=7, is_liked=False,
    ),
    _feed_item(
        "feed4", "user2", "literary_sophie", "2023-04-07T18:45:00Z",
        BadgeContent(badge_id="badge3", text="Unlocked Genre Explorer!"),
        likes_count=18, comments_count=3, is_liked=True,
    ),
    _feed_item(
        "feed5", "user3", "bookish_maya", "2023-04-06T12:00:00Z",
        ClubContent(club_id="club1", text="Joined Fantasy Fanatics."),
        likes_count=9, comments_count=1, is_liked=False,
    ),
)


def _book_club(club_id: str, member_count: int, **kwargs) -> BookClub:
    joined = club_id in JOINED_BOOK_CLUB_IDS
    return BookClub(id=club_id, other_members=member_count - (1 if joined else 0), **kwargs)


BOOK_CLUBS = (
    _book_club(
        "club1", 128,
        name="Fantasy Fanatics",
        description="For lovers of dragons, magic systems and doorstopper epics.",
        cover_image="https://images.example.com/clubs/fantasy.jpg",
        current_book_id="book5",
        upcoming_book_ids=("book1",),
        created_by="user3",
        created_at="2022-06-01",
    ),
    _book_club(
        "club2", 86,
        name="Classics Revisited",
        description="One classic a month, read slowly and discussed thoroughly.",
        cover_image="https://images.example.com/clubs/classics.jpg",
        current_book_id="book3",
        created_by="user2",
        created_at="2022-01-15",
    ),
    _book_club(
        "club3", 42,
        name="Sci-Fi Saturdays",
        description="Weekly chats about science fiction old and new.",
        cover_image="https://images.example.com/clubs/scifi.jpg",
        current_book_id="book2",
        upcoming_book_ids=("book4",),
        is_private=True,
        created_by="user4",
        created_at="2022-09-10",
    ),
)

DISCUSSIONS = (
    Discussion(
        id="discussion1",
        book_club_id="club1",
        book_id="book5",
        title="Is Kvothe a reliable narrator?",
        content="Let's talk about the frame story and how much we should trust him.",
        created_by="user3",
        created_at="2023-04-05T10:00:00Z",
        comments_count=12,
        likes_count=8,
    ),
    Discussion(
        id="discussion2",
        book_club_id="club2",
        book_id="book3",
        title="First impressions of Mr. Darcy",
        content="How did your opinion change over the first ten chapters?",
        created_by="user2",
        created_at="2023-04-02T16:30:00Z",
        comments_count=20,
        likes_count=15,
    ),
    Discussion(
        id="discussion3",
        book_club_id="club1",
        title="Next pick nominations",
        content="Drop your suggestions for May.",
        created_by="user1",
        created_at="2023-03-28T08:00:00Z",
        comments_count=4,
        likes_count=2,
    ),
)

READING_CHALLENGES = (
    ReadingChallenge(
        id="challenge1",
        title="2023 Reading Challenge",
        description="Read 50 books in 2023",
        target=50,
        progress=12,
        start_date="2023-01-01",
        end_date="2023-12-31",
    ),
    ReadingChallenge(
        id="challenge2",
        title="Genre Explorer",
        description="Read books from 10 different genres",
        target=10,
        progress=4,
        start_date="2023-01-15",
        end_date="2023-12-31",
    ),
    ReadingChallenge(
        id="challenge3",
        title="Classics Club",
        description="Read 5 classic novels",
        target=5,
        progress=1,
        start_date="2023-02-01",
        end_date="2023-12-31",
    ),
)

BADGES = (
    Badge(id="badge1", title="Bookworm", description="Read 10 books", icon="📚", unlocked_at="2022-12-15"),
    Badge(
        id="badge2",
        title="Night Owl",
        description="Log reading sessions after midnight 5 times",
        icon="🦉",
        unlocked_at="2023-01-20",
    ),
    Badge(
        id="badge3",
        title="Genre Explorer",
        description="Read books from 5 different genres",
        icon="🧭",
        unlocked_at="2023-02-05",
    ),
    Badge(id="badge4", title="Reviewer", description="Write 10 book reviews", icon="✍️"),
    Badge(id="badge5", title="Book Club Enthusiast", description="Join 3 book clubs", icon="👥"),
)


def _event(event_id: str, participants_count: int, is_participating: bool, **kwargs) -> Event:
    return Event(
        id=event_id,
        other_participants=participants_count - (1 if is_participating else 0),
        is_participating=is_participating,
        **kwargs,
    )


EVENTS = (
    _event(
        "event1", 156, True,
        title="Spring 24-Hour Readathon",
        description="Join us for a full day of reading! Share your progress, participate in "
                    "mini-challenges, and connect with other readers.",
        start_date="2023-04-15T08:00:00Z",
        end_date="2023-04-16T08:00:00Z",
        cover_image="https://images.example.com/events/readathon.jpg",
    ),
    _event(
        "event2", 243, True,
        title="Fantasy February",
        description="A month-long celebration of fantasy books. Read as many fantasy books as you "
                    "can and participate in themed discussions.",
        start_date="2023-02-01T00:00:00Z",
        end_date="2023-02-28T23:59:59Z",
        cover_image="https://images.example.com/events/fantasy-february.jpg",
    ),
    _event(
        "event3", 0, False,
        title="Summer Reading Bingo",
        description="Complete reading challenges to fill your bingo card and win prizes!",
        start_date="2023-06-01T00:00:00Z",
        end_date="2023-08-31T23:59:59Z",
        cover_image="https://images.example.com/events/bingo.jpg",
    ),
)


def seed_library_state() -> LibraryState:
    return LibraryState(books=BOOKS, user_books=USER_BOOKS)


def seed_social_state() -> SocialState:
    return SocialState(
        feed=FEED,
        book_clubs=BOOK_CLUBS,
        joined_book_club_ids=JOINED_BOOK_CLUB_IDS,
        discussions=DISCUSSIONS,
        comments=(),
    )


def seed_challenges_state() -> ChallengesState:
    return ChallengesState(challenges=READING_CHALLENGES, badges=BADGES, events=EVENTS)


def seed_preferences_state() -> PreferencesState:
    return PreferencesState()
