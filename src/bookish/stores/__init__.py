"""Stores - Qt state containers the UI layer reads from and sends actions to."""

from .base_store import StateStore, utc_now_iso
from .challenges_store import ChallengesStore
from .library_store import LibraryStore
from .preferences_store import PreferencesStore
from .social_store import SocialStore
from .state_loader import load_or_seed

__all__ = [
    "StateStore",
    "utc_now_iso",
    "LibraryStore",
    "SocialStore",
    "ChallengesStore",
    "PreferencesStore",
    "load_or_seed",
]
