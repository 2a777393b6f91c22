"""Theme selection and the colour palettes it resolves to."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict

from .book import ReadingStatus


class ThemePreference(str, Enum):
    LIGHT = "light"
    DARK = "dark"
    SYSTEM = "system"


@dataclass(frozen=True)
class Palette:
    background: str
    card: str
    text: str
    secondary_text: str
    primary: str
    secondary: str
    accent: str
    success: str
    error: str
    border: str
    highlight: str
    overlay: str


LIGHT_PALETTE = Palette(
    background="#FFFFFF",
    card="#F8F5F2",
    text="#2D2D2D",
    secondary_text="#6E6E6E",
    primary="#D48872",
    secondary="#8AABBD",
    accent="#E8B4BC",
    success="#7FB069",
    error="#E07A5F",
    border="#E8E8E8",
    highlight="#F9EAE1",
    overlay="rgba(0, 0, 0, 0.5)",
)

# Brand colours are shared with the light palette
DARK_PALETTE = Palette(
    background="#1A1A1A",
    card="#2D2D2D",
    text="#F8F5F2",
    secondary_text="#B8B8B8",
    primary="#D48872",
    secondary="#8AABBD",
    accent="#E8B4BC",
    success="#7FB069",
    error="#E07A5F",
    border="#3D3D3D",
    highlight="#3D2E29",
    overlay="rgba(0, 0, 0, 0.7)",
)

STATUS_COLORS: Dict[ReadingStatus, str] = {
    ReadingStatus.READING: "#D48872",
    ReadingStatus.COMPLETED: "#7FB069",
    ReadingStatus.TO_READ: "#8AABBD",
    ReadingStatus.DNF: "#E07A5F",
}


def palette_for(is_dark: bool) -> Palette:
    return DARK_PALETTE if is_dark else LIGHT_PALETTE
