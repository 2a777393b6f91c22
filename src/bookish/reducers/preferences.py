"""Reducer for the theme preference."""

from dataclasses import dataclass, replace
from typing import Any, Union

from bookish.core import InvalidActionError, ThemePreference


@dataclass(frozen=True)
class PreferencesState:
    theme: ThemePreference = ThemePreference.LIGHT


@dataclass(frozen=True)
class SetTheme:
    theme: Union[ThemePreference, str]


def coerce_theme(value: Union[ThemePreference, str]) -> ThemePreference:
    try:
        return ThemePreference(value)
    except ValueError as e:
        raise InvalidActionError(f"Unknown theme: {value!r}") from e


def reduce_preferences(state: PreferencesState, action: Any, now: str) -> PreferencesState:
    if isinstance(action, SetTheme):
        return replace(state, theme=coerce_theme(action.theme))
    raise InvalidActionError(f"Unsupported preferences action: {type(action).__name__}")
