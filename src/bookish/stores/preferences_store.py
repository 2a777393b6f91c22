"""Preferences store - theme selection and its resolved palette."""

from typing import Optional, Union

from bookish.core import Palette, ThemePreference, palette_for
from bookish.io import PREFERENCES_CODEC, SnapshotWriter
from bookish.reducers import PreferencesState, SetTheme, reduce_preferences
from bookish.services.appearance import AppearanceQuery, always_light
from bookish.stores.base_store import Clock, StateStore


class PreferencesStore(StateStore):
    """Theme preference.

    Only the selection is stored. ``is_dark`` and ``palette`` are resolved
    on access; ``system`` asks the injected appearance query.
    """

    def __init__(
        self,
        initial_state: Optional[PreferencesState] = None,
        writer: Optional[SnapshotWriter] = None,
        clock: Optional[Clock] = None,
        appearance_query: Optional[AppearanceQuery] = None,
    ):
        super().__init__(
            name="preferences",
            reducer=reduce_preferences,
            codec=PREFERENCES_CODEC,
            initial_state=initial_state if initial_state is not None else PreferencesState(),
            writer=writer,
            clock=clock,
        )
        self._appearance_query = appearance_query or always_light

    @property
    def theme(self) -> ThemePreference:
        return self.state.theme

    @property
    def is_dark(self) -> bool:
        if self.state.theme is ThemePreference.SYSTEM:
            return bool(self._appearance_query())
        return self.state.theme is ThemePreference.DARK

    @property
    def palette(self) -> Palette:
        return palette_for(self.is_dark)

    def set_theme(self, theme: Union[ThemePreference, str]) -> bool:
        return self.dispatch(SetTheme(theme))

    def toggle_theme(self) -> bool:
        return self.set_theme(ThemePreference.LIGHT if self.is_dark else ThemePreference.DARK)
