"""Services layer - configuration, logging, platform queries and read-time joins."""

from bookish.services.appearance import AppearanceQuery, always_light, qt_prefers_dark
from bookish.services.logging_config import JSONFormatter, setup_logging
from bookish.services.queries import (
    FeedEntry,
    ProfileStats,
    club_discussions,
    discussion_comments,
    display_percentage,
    find_user_book_for_book,
    joined_book_clubs,
    library_entries,
    profile_stats,
    progress_fraction,
    resolve_feed_item,
    resolved_feed,
)
from bookish.services.settings_manager import STORAGE_BACKENDS, SettingsManager

__all__ = [
    "AppearanceQuery",
    "always_light",
    "qt_prefers_dark",
    "JSONFormatter",
    "setup_logging",
    "FeedEntry",
    "ProfileStats",
    "club_discussions",
    "discussion_comments",
    "display_percentage",
    "find_user_book_for_book",
    "joined_book_clubs",
    "library_entries",
    "profile_stats",
    "progress_fraction",
    "resolve_feed_item",
    "resolved_feed",
    "STORAGE_BACKENDS",
    "SettingsManager",
]
