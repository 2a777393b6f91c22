"""Reducer for the feed, book clubs, discussions and comments."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Tuple, Type

from bookish.core import (
    BookClub,
    Comment,
    Discussion,
    FeedItem,
    InvalidActionError,
    InvariantViolationError,
)
from bookish.reducers.id_collections import contains_id, ensure_new_id, index_of, replace_at


@dataclass(frozen=True)
class SocialState:
    """Social snapshot.

    ``joined_book_club_ids`` is the viewer's membership set and the only
    record of it; ``member_count`` derives the viewer's share from it.
    """

    feed: Tuple[FeedItem, ...] = ()
    book_clubs: Tuple[BookClub, ...] = ()
    joined_book_club_ids: Tuple[str, ...] = ()
    discussions: Tuple[Discussion, ...] = ()
    comments: Tuple[Comment, ...] = ()

    def is_member(self, club_id: str) -> bool:
        return club_id in self.joined_book_club_ids

    def member_count(self, club: BookClub) -> int:
        return club.other_members + (1 if self.is_member(club.id) else 0)


@dataclass(frozen=True)
class AddFeedItem:
    item: FeedItem


@dataclass(frozen=True)
class ToggleLike:
    feed_item_id: str


@dataclass(frozen=True)
class AddBookClub:
    club: BookClub


@dataclass(frozen=True)
class JoinBookClub:
    club_id: str


@dataclass(frozen=True)
class LeaveBookClub:
    club_id: str


@dataclass(frozen=True)
class AddDiscussion:
    discussion: Discussion


@dataclass(frozen=True)
class AddComment:
    comment: Comment


def _add_feed_item(state: SocialState, action: AddFeedItem, now: str) -> SocialState:
    ensure_new_id(state.feed, action.item.id, "FeedItem")
    return replace(state, feed=(action.item,) + state.feed)


def _toggle_like(state: SocialState, action: ToggleLike, now: str) -> SocialState:
    index = index_of(state.feed, action.feed_item_id, "FeedItem")
    item = state.feed[index]
    return replace(state, feed=replace_at(state.feed, index, replace(item, is_liked=not item.is_liked)))


def _add_book_club(state: SocialState, action: AddBookClub, now: str) -> SocialState:
    ensure_new_id(state.book_clubs, action.club.id, "BookClub")
    return replace(state, book_clubs=state.book_clubs + (action.club,))


def _join_book_club(state: SocialState, action: JoinBookClub, now: str) -> SocialState:
    index_of(state.book_clubs, action.club_id, "BookClub")
    if state.is_member(action.club_id):
        raise InvariantViolationError(f"Already a member of book club '{action.club_id}'")
    return replace(state, joined_book_club_ids=state.joined_book_club_ids + (action.club_id,))


def _leave_book_club(state: SocialState, action: LeaveBookClub, now: str) -> SocialState:
    index_of(state.book_clubs, action.club_id, "BookClub")
    if not state.is_member(action.club_id):
        raise InvariantViolationError(f"Cannot leave book club '{action.club_id}' without joining it")
    remaining = tuple(club_id for club_id in state.joined_book_club_ids if club_id != action.club_id)
    return replace(state, joined_book_club_ids=remaining)


def _add_discussion(state: SocialState, action: AddDiscussion, now: str) -> SocialState:
    ensure_new_id(state.discussions, action.discussion.id, "Discussion")
    return replace(state, discussions=(action.discussion,) + state.discussions)


def _add_comment(state: SocialState, action: AddComment, now: str) -> SocialState:
    comment = action.comment
    ensure_new_id(state.comments, comment.id, "Comment")
    discussions = state.discussions
    if contains_id(discussions, comment.discussion_id):
        index = index_of(discussions, comment.discussion_id, "Discussion")
        discussion = discussions[index]
        discussions = replace_at(
            discussions, index, replace(discussion, comments_count=discussion.comments_count + 1)
        )
    return replace(state, comments=state.comments + (comment,), discussions=discussions)


_HANDLERS: Dict[Type[Any], Callable[[SocialState, Any, str], SocialState]] = {
    AddFeedItem: _add_feed_item,
    ToggleLike: _toggle_like,
    AddBookClub: _add_book_club,
    JoinBookClub: _join_book_club,
    LeaveBookClub: _leave_book_club,
    AddDiscussion: _add_discussion,
    AddComment: _add_comment,
}


def reduce_social(state: SocialState, action: Any, now: str) -> SocialState:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise InvalidActionError(f"Unsupported social action: {type(action).__name__}")
    return handler(state, action, now)
