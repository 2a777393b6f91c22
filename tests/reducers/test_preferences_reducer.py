"""Unit tests for the preferences reducer."""

import pytest

from bookish.core import InvalidActionError, ThemePreference
from bookish.reducers import PreferencesState, SetTheme, reduce_preferences

NOW = "2024-05-01T12:00:00+00:00"


def test_default_theme_is_light():
    assert PreferencesState().theme is ThemePreference.LIGHT


@pytest.mark.parametrize("value", ["light", "dark", "system", ThemePreference.DARK])
def test_set_theme_accepts_enum_or_value(value):
    new_state = reduce_preferences(PreferencesState(), SetTheme(value), NOW)
    assert new_state.theme is ThemePreference(value)


def test_set_theme_rejects_unknown_value():
    with pytest.raises(InvalidActionError, match="sepia"):
        reduce_preferences(PreferencesState(), SetTheme("sepia"), NOW)


def test_unsupported_action():
    with pytest.raises(InvalidActionError):
        reduce_preferences(PreferencesState(), "dark", NOW)
