#!/usr/bin/env python3
"""
Cardfolio - Main Textual TUI Application

A digital business card: fill in name, hobby and age, save to lock it.

Keyboard controls:
- Tab / Shift+Tab: Move between fields and buttons
- F2: Save (checks every field is filled in, then locks)
- F3: Edit (unlocks a locked card)
- F4: Toggle lock without checking (same as the status chip)
- F12: Toggle dark/light theme
- Ctrl+Q: Quit
"""

import logging
import os
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.css.query import NoMatches

from .card_form import notification_for
from .constants import APP_TITLE, HINT_BANNER_SECONDS
from .modes.card_view import CardSaved, CardView
from .theme import CARD_THEMES, CardTheme, initial_theme, other_theme

logger = logging.getLogger(__name__)


class CardfolioApp(App):
    """
    Cardfolio - a one-screen business card.

    F2: Save
    F3: Edit
    F4: Lock/unlock
    F12: Toggle dark/light mode
    """

    TITLE = APP_TITLE

    CSS = """
    Screen {
        background: $background;
    }

    #card-view {
        width: 100%;
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("f2", "save", "Save", show=False, priority=True),
        Binding("f3", "edit", "Edit", show=False, priority=True),
        Binding("f4", "toggle_lock", "Lock", show=False, priority=True),
        Binding("f12", "toggle_theme", "Theme", show=False, priority=True),
        Binding("ctrl+q", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        card_theme: Optional[CardTheme] = None,
        hint_seconds: float = HINT_BANNER_SECONDS,
    ):
        super().__init__()
        self.card_theme = card_theme or initial_theme()
        self.hint_seconds = hint_seconds

        for registered in CARD_THEMES.values():
            self.register_theme(registered.textual_theme)
        self.theme = self.card_theme.name

    def compose(self) -> ComposeResult:
        """Create the UI layout"""
        yield CardView(self.card_theme, hint_seconds=self.hint_seconds, id="card-view")

    @property
    def card_view(self) -> CardView:
        return self.query_one("#card-view", CardView)

    def on_card_saved(self, event: CardSaved) -> None:
        """Toast the save outcome"""
        message = notification_for(event.result)
        if event.result.accepted:
            self.notify(message, timeout=2)
        else:
            self.notify(message, severity="warning", timeout=2)

    def action_save(self) -> None:
        """Save the card (F2)"""
        try:
            self.card_view.save()
        except NoMatches:
            pass

    def action_edit(self) -> None:
        """Unlock the card (F3)"""
        try:
            self.card_view.edit()
        except NoMatches:
            pass

    def action_toggle_lock(self) -> None:
        """Lock/unlock without checking fields (F4)"""
        try:
            self.card_view.toggle_lock()
        except NoMatches:
            pass

    def action_toggle_theme(self) -> None:
        """Toggle between dark and light mode (F12)"""
        self.card_theme = other_theme(self.card_theme)
        self.theme = self.card_theme.name
        logger.debug("Theme -> %s", self.card_theme.name)
        try:
            self.card_view.apply_theme(self.card_theme)
        except NoMatches:
            pass


def _configure_logging() -> Optional[logging.Handler]:
    """Log to CARDFOLIO_LOG_FILE if set. The TUI owns the terminal otherwise."""
    log_file = os.environ.get("CARDFOLIO_LOG_FILE")
    if not log_file:
        return None

    handler = logging.FileHandler(log_file)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG)
    return handler


def main():
    """Entry point for Cardfolio"""
    _configure_logging()
    app = CardfolioApp()
    app.run()


if __name__ == "__main__":
    main()
