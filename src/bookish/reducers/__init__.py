"""Pure reducers - (state, action, now) -> new state, one module per store."""

from .challenges import (
    AddChallenge,
    ChallengesState,
    CompleteChallenge,
    JoinEvent,
    LeaveEvent,
    UnlockBadge,
    UpdateChallengeProgress,
    reduce_challenges,
)
from .library import (
    AddBook,
    AddNote,
    AddReview,
    AddUserBook,
    LibraryState,
    RemoveNote,
    ToggleWishlist,
    UpdateBook,
    UpdateReadingProgress,
    UpdateReadingStatus,
    UpdateUserBook,
    reduce_library,
)
from .preferences import PreferencesState, SetTheme, reduce_preferences
from .social import (
    AddBookClub,
    AddComment,
    AddDiscussion,
    AddFeedItem,
    JoinBookClub,
    LeaveBookClub,
    SocialState,
    ToggleLike,
    reduce_social,
)

__all__ = [
    "AddChallenge",
    "ChallengesState",
    "CompleteChallenge",
    "JoinEvent",
    "LeaveEvent",
    "UnlockBadge",
    "UpdateChallengeProgress",
    "reduce_challenges",
    "AddBook",
    "AddNote",
    "AddReview",
    "AddUserBook",
    "LibraryState",
    "RemoveNote",
    "ToggleWishlist",
    "UpdateBook",
    "UpdateReadingProgress",
    "UpdateReadingStatus",
    "UpdateUserBook",
    "reduce_library",
    "PreferencesState",
    "SetTheme",
    "reduce_preferences",
    "AddBookClub",
    "AddComment",
    "AddDiscussion",
    "AddFeedItem",
    "JoinBookClub",
    "LeaveBookClub",
    "SocialState",
    "ToggleLike",
    "reduce_social",
]
