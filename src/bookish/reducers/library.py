"""Reducer for the catalogue and the user's tracking records."""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Tuple, Type, Union

from bookish.core import (
    Book,
    DuplicateEntityError,
    InvalidActionError,
    ReadingStatus,
    Review,
    UserBook,
)
from bookish.reducers.id_collections import ensure_new_id, index_of, merge_fields, replace_at


@dataclass(frozen=True)
class LibraryState:
    books: Tuple[Book, ...] = ()
    user_books: Tuple[UserBook, ...] = ()


@dataclass(frozen=True)
class AddBook:
    book: Book


@dataclass(frozen=True)
class UpdateBook:
    book_id: str
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AddUserBook:
    user_book: UserBook


@dataclass(frozen=True)
class UpdateUserBook:
    user_book_id: str
    changes: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class UpdateReadingStatus:
    user_book_id: str
    status: Union[ReadingStatus, str]


@dataclass(frozen=True)
class UpdateReadingProgress:
    user_book_id: str
    current_page: int


@dataclass(frozen=True)
class AddReview:
    user_book_id: str
    text: str
    rating: float
    contains_spoilers: bool = False


@dataclass(frozen=True)
class ToggleWishlist:
    user_book_id: str


@dataclass(frozen=True)
class AddNote:
    user_book_id: str
    note: str


@dataclass(frozen=True)
class RemoveNote:
    user_book_id: str
    index: int


def coerce_status(value: Union[ReadingStatus, str]) -> ReadingStatus:
    try:
        return ReadingStatus(value)
    except ValueError as e:
        raise InvalidActionError(f"Unknown reading status: {value!r}") from e


def _update_user_book(
    state: LibraryState, user_book_id: str, update: Callable[[UserBook], UserBook]
) -> LibraryState:
    index = index_of(state.user_books, user_book_id, "UserBook")
    updated = update(state.user_books[index])
    return replace(state, user_books=replace_at(state.user_books, index, updated))


def _add_book(state: LibraryState, action: AddBook, now: str) -> LibraryState:
    ensure_new_id(state.books, action.book.id, "Book")
    return replace(state, books=state.books + (action.book,))


def _update_book(state: LibraryState, action: UpdateBook, now: str) -> LibraryState:
    index = index_of(state.books, action.book_id, "Book")
    book = merge_fields(state.books[index], action.changes, "Book")
    return replace(state, books=replace_at(state.books, index, book))


def _ensure_unique_pair(user_books: Tuple[UserBook, ...], record: UserBook) -> None:
    """One tracking record per (user, book); ``record`` itself is skipped by id."""
    for existing in user_books:
        if existing.id == record.id:
            continue
        if existing.user_id == record.user_id and existing.book_id == record.book_id:
            raise DuplicateEntityError(
                "UserBook",
                record.id,
                f"user {record.user_id} already tracks book {record.book_id} as {existing.id}",
            )


def _check_page(current_page: int) -> None:
    if current_page < 0:
        raise InvalidActionError(f"Current page cannot be negative: {current_page}")


def _check_rating(rating: float) -> None:
    if not 0 <= rating <= 5:
        raise InvalidActionError(f"Rating must be between 0 and 5, got {rating}")


def _add_user_book(state: LibraryState, action: AddUserBook, now: str) -> LibraryState:
    record = replace(action.user_book, status=coerce_status(action.user_book.status))
    ensure_new_id(state.user_books, record.id, "UserBook")
    _ensure_unique_pair(state.user_books, record)
    return replace(state, user_books=state.user_books + (record,))


def _update_user_book_fields(state: LibraryState, action: UpdateUserBook, now: str) -> LibraryState:
    changes = dict(action.changes)
    if "status" in changes:
        changes["status"] = coerce_status(changes["status"])
    if "current_page" in changes:
        _check_page(changes["current_page"])
    if changes.get("rating") is not None:
        _check_rating(changes["rating"])
    if "notes" in changes:
        changes["notes"] = tuple(changes["notes"])

    index = index_of(state.user_books, action.user_book_id, "UserBook")
    updated = merge_fields(state.user_books[index], changes, "UserBook")
    _ensure_unique_pair(state.user_books, updated)
    return replace(state, user_books=replace_at(state.user_books, index, updated))


def _update_reading_status(state: LibraryState, action: UpdateReadingStatus, now: str) -> LibraryState:
    status = coerce_status(action.status)

    def update(ub: UserBook) -> UserBook:
        changes: Dict[str, Any] = {"status": status}
        if status is ReadingStatus.COMPLETED and ub.finish_date is None:
            changes["finish_date"] = now
        if status is ReadingStatus.READING and ub.start_date is None:
            changes["start_date"] = now
        # finish_date is kept when leaving COMPLETED
        return replace(ub, **changes)

    return _update_user_book(state, action.user_book_id, update)


def _update_reading_progress(state: LibraryState, action: UpdateReadingProgress, now: str) -> LibraryState:
    _check_page(action.current_page)

    def update(ub: UserBook) -> UserBook:
        changes: Dict[str, Any] = {"current_page": action.current_page}
        if ub.status is not ReadingStatus.READING:
            changes["status"] = ReadingStatus.READING
            if ub.start_date is None:
                changes["start_date"] = now
        return replace(ub, **changes)

    return _update_user_book(state, action.user_book_id, update)


def _add_review(state: LibraryState, action: AddReview, now: str) -> LibraryState:
    _check_rating(action.rating)
    review = Review(text=action.text, contains_spoilers=action.contains_spoilers, created_at=now)
    return _update_user_book(
        state, action.user_book_id, lambda ub: replace(ub, rating=action.rating, review=review)
    )


def _toggle_wishlist(state: LibraryState, action: ToggleWishlist, now: str) -> LibraryState:
    return _update_user_book(
        state, action.user_book_id, lambda ub: replace(ub, is_wishlisted=not ub.is_wishlisted)
    )


def _add_note(state: LibraryState, action: AddNote, now: str) -> LibraryState:
    return _update_user_book(
        state, action.user_book_id, lambda ub: replace(ub, notes=ub.notes + (action.note,))
    )


def _remove_note(state: LibraryState, action: RemoveNote, now: str) -> LibraryState:
    def update(ub: UserBook) -> UserBook:
        if not 0 <= action.index < len(ub.notes):
            raise InvalidActionError(
                f"Note index {action.index} out of range for user book '{ub.id}' with {len(ub.notes)} notes"
            )
        return replace(ub, notes=ub.notes[:action.index] + ub.notes[action.index + 1:])

    return _update_user_book(state, action.user_book_id, update)


_HANDLERS: Dict[Type[Any], Callable[[LibraryState, Any, str], LibraryState]] = {
    AddBook: _add_book,
    UpdateBook: _update_book,
    AddUserBook: _add_user_book,
    UpdateUserBook: _update_user_book_fields,
    UpdateReadingStatus: _update_reading_status,
    UpdateReadingProgress: _update_reading_progress,
    AddReview: _add_review,
    ToggleWishlist: _toggle_wishlist,
    AddNote: _add_note,
    RemoveNote: _remove_note,
}


def reduce_library(state: LibraryState, action: Any, now: str) -> LibraryState:
    """Apply ``action`` to ``state`` and return the new state.

    Args:
        state: Current snapshot; never modified.
        action: One of the action dataclasses defined in this module.
        now: ISO timestamp used for any date the action stamps.

    Raises:
        BookishError: subclasses describe why the action was rejected.
    """
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise InvalidActionError(f"Unsupported library action: {type(action).__name__}")
    return handler(state, action, now)
