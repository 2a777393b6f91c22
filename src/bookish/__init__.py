"""
Bookish - client-side state for a reading tracker.

This package provides:
- A book catalogue with per-reader tracking records (status, progress, reviews, notes)
- A social feed, book clubs and discussions
- Reading challenges, badges and events
- Theme preferences
each held in a Qt state store and persisted to local key-value storage.
"""

__version__ = "0.1.0"

# Make key components available at package level
from bookish.app import AppContext, create_context
from bookish.core import Book, ReadingStatus, UserBook

__all__ = [
    "AppContext",
    "create_context",
    "Book",
    "ReadingStatus",
    "UserBook",
]
