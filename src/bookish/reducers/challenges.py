"""Reducer for reading challenges, badges and events."""

from dataclasses import dataclass, replace
from typing import Any, Callable, Dict, Tuple, Type

from bookish.core import (
    Badge,
    Event,
    InvalidActionError,
    InvariantViolationError,
    ReadingChallenge,
)
from bookish.reducers.id_collections import ensure_new_id, index_of, replace_at


@dataclass(frozen=True)
class ChallengesState:
    challenges: Tuple[ReadingChallenge, ...] = ()
    badges: Tuple[Badge, ...] = ()
    events: Tuple[Event, ...] = ()


@dataclass(frozen=True)
class AddChallenge:
    challenge: ReadingChallenge


@dataclass(frozen=True)
class UpdateChallengeProgress:
    challenge_id: str
    progress: int


@dataclass(frozen=True)
class CompleteChallenge:
    challenge_id: str


@dataclass(frozen=True)
class UnlockBadge:
    badge_id: str


@dataclass(frozen=True)
class JoinEvent:
    event_id: str


@dataclass(frozen=True)
class LeaveEvent:
    event_id: str


def _set_challenge_progress(state: ChallengesState, challenge_id: str, progress: int) -> ChallengesState:
    index = index_of(state.challenges, challenge_id, "ReadingChallenge")
    if state.challenges[index].progress == progress:
        return state
    challenge = replace(state.challenges[index], progress=progress)
    return replace(state, challenges=replace_at(state.challenges, index, challenge))


def _add_challenge(state: ChallengesState, action: AddChallenge, now: str) -> ChallengesState:
    if action.challenge.target <= 0:
        raise InvalidActionError(f"Challenge target must be positive, got {action.challenge.target}")
    ensure_new_id(state.challenges, action.challenge.id, "ReadingChallenge")
    return replace(state, challenges=state.challenges + (action.challenge,))


def _update_challenge_progress(
    state: ChallengesState, action: UpdateChallengeProgress, now: str
) -> ChallengesState:
    if action.progress < 0:
        raise InvalidActionError(f"Challenge progress cannot be negative: {action.progress}")
    return _set_challenge_progress(state, action.challenge_id, action.progress)


def _complete_challenge(state: ChallengesState, action: CompleteChallenge, now: str) -> ChallengesState:
    index = index_of(state.challenges, action.challenge_id, "ReadingChallenge")
    return _set_challenge_progress(state, action.challenge_id, state.challenges[index].target)


def _unlock_badge(state: ChallengesState, action: UnlockBadge, now: str) -> ChallengesState:
    index = index_of(state.badges, action.badge_id, "Badge")
    badge = state.badges[index]
    if badge.is_unlocked:
        return state
    return replace(state, badges=replace_at(state.badges, index, replace(badge, unlocked_at=now)))


def _set_participation(state: ChallengesState, event_id: str, participating: bool) -> ChallengesState:
    index = index_of(state.events, event_id, "Event")
    event = state.events[index]
    if event.is_participating == participating:
        verb = "join" if participating else "leave"
        raise InvariantViolationError(
            f"Cannot {verb} event '{event_id}': participation is already {participating}"
        )
    return replace(
        state, events=replace_at(state.events, index, replace(event, is_participating=participating))
    )


def _join_event(state: ChallengesState, action: JoinEvent, now: str) -> ChallengesState:
    return _set_participation(state, action.event_id, True)


def _leave_event(state: ChallengesState, action: LeaveEvent, now: str) -> ChallengesState:
    return _set_participation(state, action.event_id, False)


_HANDLERS: Dict[Type[Any], Callable[[ChallengesState, Any, str], ChallengesState]] = {
    AddChallenge: _add_challenge,
    UpdateChallengeProgress: _update_challenge_progress,
    CompleteChallenge: _complete_challenge,
    UnlockBadge: _unlock_badge,
    JoinEvent: _join_event,
    LeaveEvent: _leave_event,
}


def reduce_challenges(state: ChallengesState, action: Any, now: str) -> ChallengesState:
    handler = _HANDLERS.get(type(action))
    if handler is None:
        raise InvalidActionError(f"Unsupported challenges action: {type(action).__name__}")
    return handler(state, action, now)
