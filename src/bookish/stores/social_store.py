"""Social store - feed, book clubs, discussions and comments."""

import logging
from typing import List, Optional

from bookish.core import BookClub, Comment, Discussion, FeedItem
from bookish.io import SOCIAL_CODEC, SnapshotWriter
from bookish.reducers import (
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
from bookish.stores.base_store import Clock, StateStore

logger = logging.getLogger(__name__)


class SocialStore(StateStore):
    def __init__(
        self,
        initial_state: Optional[SocialState] = None,
        writer: Optional[SnapshotWriter] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            name="social",
            reducer=reduce_social,
            codec=SOCIAL_CODEC,
            initial_state=initial_state if initial_state is not None else SocialState(),
            writer=writer,
            clock=clock,
        )

    @property
    def feed(self) -> List[FeedItem]:
        return list(self.state.feed)

    @property
    def book_clubs(self) -> List[BookClub]:
        return list(self.state.book_clubs)

    @property
    def joined_book_club_ids(self) -> List[str]:
        return list(self.state.joined_book_club_ids)

    @property
    def discussions(self) -> List[Discussion]:
        return list(self.state.discussions)

    @property
    def comments(self) -> List[Comment]:
        return list(self.state.comments)

    def find_feed_item(self, feed_item_id: str) -> Optional[FeedItem]:
        return next((item for item in self.state.feed if item.id == feed_item_id), None)

    def find_book_club(self, club_id: str) -> Optional[BookClub]:
        return next((club for club in self.state.book_clubs if club.id == club_id), None)

    def find_discussion(self, discussion_id: str) -> Optional[Discussion]:
        return next((d for d in self.state.discussions if d.id == discussion_id), None)

    def member_count(self, club_id: str) -> Optional[int]:
        club = self.find_book_club(club_id)
        return self.state.member_count(club) if club else None

    def is_member(self, club_id: str) -> bool:
        return self.state.is_member(club_id)

    def add_feed_item(self, item: FeedItem) -> bool:
        return self.dispatch(AddFeedItem(item))

    def toggle_like(self, feed_item_id: str) -> bool:
        return self.dispatch(ToggleLike(feed_item_id))

    def add_book_club(self, club: BookClub) -> bool:
        return self.dispatch(AddBookClub(club))

    def join_book_club(self, club_id: str) -> bool:
        return self.dispatch(JoinBookClub(club_id))

    def leave_book_club(self, club_id: str) -> bool:
        return self.dispatch(LeaveBookClub(club_id))

    def add_discussion(self, discussion: Discussion) -> bool:
        if self.find_book_club(discussion.book_club_id) is None:
            logger.warning(
                "Discussion %s references unknown book club %s", discussion.id, discussion.book_club_id
            )
        return self.dispatch(AddDiscussion(discussion))

    def add_comment(self, comment: Comment) -> bool:
        if self.find_discussion(comment.discussion_id) is None:
            logger.warning(
                "Comment %s references unknown discussion %s; counters left unchanged",
                comment.id,
                comment.discussion_id,
            )
        return self.dispatch(AddComment(comment))
