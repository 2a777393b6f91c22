"""Operating-system appearance queries used to resolve the ``system`` theme."""

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication

# Returns True when the platform is currently in dark mode
AppearanceQuery = Callable[[], bool]


def always_light() -> bool:
    return False


def qt_prefers_dark() -> bool:
    """Ask Qt for the platform colour scheme.

    Needs a running QGuiApplication; without one (console entry point,
    tests) the answer is light.
    """
    app = QGuiApplication.instance()
    if not isinstance(app, QGuiApplication):
        return False
    return app.styleHints().colorScheme() == Qt.ColorScheme.Dark
