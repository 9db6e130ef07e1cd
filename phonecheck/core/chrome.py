"""Sidebar and theme handling, independent of the validation flow."""

from __future__ import annotations

import logging

from .state import Theme, UIState

logger = logging.getLogger("phonecheck.chrome")


class ChromeController:
    def __init__(self, state: UIState) -> None:
        self.state = state

    # Sidebar

    def toggle_sidebar(self) -> None:
        if self.state.sidebar_open:
            self.close_sidebar()
        else:
            self.open_sidebar()

    def open_sidebar(self) -> None:
        self.state.sidebar_open = True
        self.state.scroll_locked = True

    def close_sidebar(self) -> None:
        self.state.sidebar_open = False
        self.state.scroll_locked = False

    def document_keydown(self, key: str) -> None:
        if key == "Escape" and self.state.sidebar_open:
            self.close_sidebar()

    # Theme

    def set_theme(self, theme: Theme) -> None:
        self.state.theme = theme

    def load_theme_preference(self, prefers_dark: bool) -> None:
        """Initialise the theme from the OS colour-scheme preference."""
        self.set_theme(Theme.DARK if prefers_dark else Theme.LIGHT)

    def theme_toggle(self, checked: bool) -> None:
        theme = Theme.DARK if checked else Theme.LIGHT
        self.set_theme(theme)
        # Nothing is persisted; the OS preference is re-read on next start.
        logger.info(f"Theme set to: {theme.value}")

    def system_theme_change(self, prefers_dark: bool) -> None:
        """Follow an OS preference change unless the toggle already agrees."""
        checked = self.state.theme_toggle_checked
        if not checked and prefers_dark:
            self.set_theme(Theme.DARK)
        elif checked and not prefers_dark:
            self.set_theme(Theme.LIGHT)
