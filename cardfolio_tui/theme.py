"""
Cardfolio - Card Themes

Light and dark palettes for the card. Each CardTheme bundles a Textual Theme
(registered with the app) with the extra colors Textual's theme has no slot
for. The active CardTheme is passed to the card view explicitly.
"""

import os
from dataclasses import dataclass

from textual.theme import Theme


@dataclass(frozen=True)
class CardTheme:
    """A Textual theme plus the card's backdrop colors"""
    textual_theme: Theme
    gradient_top: str     # Backdrop behind the card
    gradient_bottom: str  # Title row and card edge

    @property
    def name(self) -> str:
        return self.textual_theme.name

    @property
    def dark(self) -> bool:
        return self.textual_theme.dark


PRIMARY_BLUE = "#1565c0"
SECONDARY_PINK = "#d81b60"

CARD_LIGHT = CardTheme(
    textual_theme=Theme(
        name="cardfolio-light",
        primary=PRIMARY_BLUE,
        secondary=SECONDARY_PINK,
        accent="#7d5260",
        warning="#b26a00",
        error="#b3261e",
        success="#2e7d32",
        foreground="#000000",
        background="#e0e0e0",
        surface="#ffffff",
        panel="#f3f3f3",
        dark=False,
    ),
    gradient_top="#e0e0e0",
    gradient_bottom="#ffcdd2",
)

CARD_DARK = CardTheme(
    textual_theme=Theme(
        name="cardfolio-dark",
        primary=PRIMARY_BLUE,
        secondary=SECONDARY_PINK,
        accent="#efb8c8",
        warning="#e0a040",
        error="#f2b8b5",
        success="#81c784",
        foreground="#ffffff",
        background="#424242",
        surface="#1c1b1f",
        panel="#2b2930",
        dark=True,
    ),
    gradient_top="#bbdefb",
    gradient_bottom="#424242",
)

CARD_THEMES = {
    "light": CARD_LIGHT,
    "dark": CARD_DARK,
}


def initial_theme() -> CardTheme:
    """Starting theme: CARDFOLIO_THEME=light|dark, dark otherwise."""
    choice = os.environ.get("CARDFOLIO_THEME", "dark").strip().lower()
    return CARD_THEMES.get(choice, CARD_DARK)


def other_theme(current: CardTheme) -> CardTheme:
    return CARD_LIGHT if current.dark else CARD_DARK
