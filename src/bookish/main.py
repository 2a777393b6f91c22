"""Main entry point - rehydrates the stores and prints a reading summary."""

import sys

from PySide6.QtCore import QCoreApplication, QThreadPool

from bookish.app import create_context
from bookish.core import ReadingStatus
from bookish.services import SettingsManager, library_entries, profile_stats, setup_logging


def main():
    """
    Bootstrap following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Configuration and logging
    settings = SettingsManager()
    setup_logging(settings.get_log_level(), settings.get_log_format())

    # 2. Qt application (owns the thread pool used for persistence)
    app = QCoreApplication(sys.argv)
    app.setApplicationName("Bookish")
    app.setOrganizationName("Bookish")

    # 3. Stores
    context = create_context(settings=settings, thread_pool=QThreadPool.globalInstance())

    # 4. Summary
    stats = profile_stats(context.library.state, context.social.state, context.challenges.state)
    print("Currently reading:")
    for user_book, book in library_entries(context.library.state, ReadingStatus.READING):
        print(f"  {book.title} by {book.author} - page {user_book.current_page}/{book.page_count}")
    print(f"Completed books: {stats.completed_books}")
    print(f"Badges unlocked: {stats.unlocked_badges} of {stats.total_badges}")
    print(f"Book clubs joined: {stats.joined_book_clubs}")
    print(f"Theme: {context.preferences.theme.value}")

    # 5. Seed data is written on first run so the next launch rehydrates it
    for store in (context.library, context.social, context.challenges, context.preferences):
        store.persist()
    context.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
