"""Challenges store - reading challenges, badges and events."""

from typing import List, Optional

from bookish.core import Badge, Event, ReadingChallenge
from bookish.io import CHALLENGES_CODEC, SnapshotWriter
from bookish.reducers import (
    AddChallenge,
    ChallengesState,
    CompleteChallenge,
    JoinEvent,
    LeaveEvent,
    UnlockBadge,
    UpdateChallengeProgress,
    reduce_challenges,
)
from bookish.stores.base_store import Clock, StateStore


class ChallengesStore(StateStore):
    def __init__(
        self,
        initial_state: Optional[ChallengesState] = None,
        writer: Optional[SnapshotWriter] = None,
        clock: Optional[Clock] = None,
    ):
        super().__init__(
            name="challenges",
            reducer=reduce_challenges,
            codec=CHALLENGES_CODEC,
            initial_state=initial_state if initial_state is not None else ChallengesState(),
            writer=writer,
            clock=clock,
        )

    @property
    def challenges(self) -> List[ReadingChallenge]:
        return list(self.state.challenges)

    @property
    def badges(self) -> List[Badge]:
        return list(self.state.badges)

    @property
    def events(self) -> List[Event]:
        return list(self.state.events)

    def find_challenge(self, challenge_id: str) -> Optional[ReadingChallenge]:
        return next((c for c in self.state.challenges if c.id == challenge_id), None)

    def find_badge(self, badge_id: str) -> Optional[Badge]:
        return next((b for b in self.state.badges if b.id == badge_id), None)

    def find_event(self, event_id: str) -> Optional[Event]:
        return next((e for e in self.state.events if e.id == event_id), None)

    def add_challenge(self, challenge: ReadingChallenge) -> bool:
        return self.dispatch(AddChallenge(challenge))

    def update_challenge_progress(self, challenge_id: str, progress: int) -> bool:
        return self.dispatch(UpdateChallengeProgress(challenge_id, progress))

    def complete_challenge(self, challenge_id: str) -> bool:
        return self.dispatch(CompleteChallenge(challenge_id))

    def unlock_badge(self, badge_id: str) -> bool:
        return self.dispatch(UnlockBadge(badge_id))

    def join_event(self, event_id: str) -> bool:
        return self.dispatch(JoinEvent(event_id))

    def leave_event(self, event_id: str) -> bool:
        return self.dispatch(LeaveEvent(event_id))

    def toggle_event_participation(self, event_id: str) -> bool:
        """Join or leave depending on the current flag, as the participate button does."""
        event = self.find_event(event_id)
        if event is not None and event.is_participating:
            return self.leave_event(event_id)
        return self.join_event(event_id)
