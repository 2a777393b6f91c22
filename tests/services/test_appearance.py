"""Tests for appearance queries."""

import pytest
from PySide6.QtCore import QCoreApplication
from PySide6.QtGui import QGuiApplication

from bookish.services import always_light, qt_prefers_dark


def ensure_qt_app():
    if QCoreApplication.instance() is None:
        QCoreApplication([])


def test_always_light():
    assert always_light() is False


def test_qt_query_without_gui_application_reports_light():
    ensure_qt_app()
    if isinstance(QCoreApplication.instance(), QGuiApplication):
        pytest.skip("a GUI application is already running")
    assert qt_prefers_dark() is False
