"""Reading challenges, badges and community events."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ReadingChallenge:
    id: str
    title: str
    target: int
    progress: int = 0
    description: str = ""
    start_date: str = ""
    end_date: str = ""

    @property
    def is_completed(self) -> bool:
        return self.progress >= self.target


@dataclass(frozen=True)
class Badge:
    """One-way achievement marker; unlocked once ``unlocked_at`` is set."""

    id: str
    title: str
    description: str = ""
    icon: str = ""
    unlocked_at: Optional[str] = None

    @property
    def is_unlocked(self) -> bool:
        return self.unlocked_at is not None


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    description: str = ""
    start_date: str = ""
    end_date: str = ""
    cover_image: str = ""
    other_participants: int = 0
    is_participating: bool = False

    @property
    def participants_count(self) -> int:
        return self.other_participants + (1 if self.is_participating else 0)
