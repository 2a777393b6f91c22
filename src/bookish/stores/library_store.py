"""Library store - the catalogue and the reader's tracking records."""

import logging
from typing import List, Optional, Union

from bookish.core import Book, ReadingStatus, UserBook
from bookish.io import LIBRARY_CODEC, SnapshotWriter
from bookish.reducers import (
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
from bookish.stores.base_store import Clock, StateStore

logger = logging.getLogger(__name__)


class LibraryStore(StateStore):
    """Catalogue and per-book tracking state.

    All ``user_book_id`` actions return False and emit ``action_failed``
    for unknown ids.
    """

    def __init__(
        self,
        initial_state: Optional[LibraryState] = None,
        writer: Optional[SnapshotWriter] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            name="library",
            reducer=reduce_library,
            codec=LIBRARY_CODEC,
            initial_state=initial_state if initial_state is not None else LibraryState(),
            writer=writer,
            clock=clock,
        )

    @property
    def books(self) -> List[Book]:
        return list(self.state.books)

    @property
    def user_books(self) -> List[UserBook]:
        return list(self.state.user_books)

    @property
    def currently_reading(self) -> List[UserBook]:
        return self.with_status(ReadingStatus.READING)

    @property
    def completed(self) -> List[UserBook]:
        return self.with_status(ReadingStatus.COMPLETED)

    @property
    def to_read(self) -> List[UserBook]:
        return self.with_status(ReadingStatus.TO_READ)

    @property
    def dnf(self) -> List[UserBook]:
        return self.with_status(ReadingStatus.DNF)

    @property
    def wishlisted(self) -> List[UserBook]:
        return [ub for ub in self.state.user_books if ub.is_wishlisted]

    def with_status(self, status: Union[ReadingStatus, str]) -> List[UserBook]:
        return [ub for ub in self.state.user_books if ub.status == status]

    def find_book(self, book_id: str) -> Optional[Book]:
        return next((book for book in self.state.books if book.id == book_id), None)

    def find_user_book(self, user_book_id: str) -> Optional[UserBook]:
        return next((ub for ub in self.state.user_books if ub.id == user_book_id), None)

    def add_book(self, book: Book) -> bool:
        return self.dispatch(AddBook(book))

    def update_book(self, book_id: str, **changes) -> bool:
        return self.dispatch(UpdateBook(book_id, changes))

    def add_user_book(self, user_book: UserBook) -> bool:
        if self.find_book(user_book.book_id) is None:
            logger.warning(
                "User book %s references unknown book %s", user_book.id, user_book.book_id
            )
        return self.dispatch(AddUserBook(user_book))

    def update_user_book(self, user_book_id: str, **changes) -> bool:
        return self.dispatch(UpdateUserBook(user_book_id, changes))

    def update_reading_status(self, user_book_id: str, status: Union[ReadingStatus, str]) -> bool:
        return self.dispatch(UpdateReadingStatus(user_book_id, status))

    def update_reading_progress(self, user_book_id: str, current_page: int) -> bool:
        return self.dispatch(UpdateReadingProgress(user_book_id, current_page))

    def add_review(self, user_book_id: str, text: str, rating: float, contains_spoilers: bool = False) -> bool:
        return self.dispatch(AddReview(user_book_id, text, rating, contains_spoilers))

    def toggle_wishlist(self, user_book_id: str) -> bool:
        return self.dispatch(ToggleWishlist(user_book_id))

    def add_note(self, user_book_id: str, note: str) -> bool:
        return self.dispatch(AddNote(user_book_id, note))

    def remove_note(self, user_book_id: str, index: int) -> bool:
        return self.dispatch(RemoveNote(user_book_id, index))
