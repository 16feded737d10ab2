"""
Cardfolio - Shared Constants

Central location for constants used across the app.

Demo mode: Set CARDFOLIO_DEMO=1 to use a shorter hint banner for testing.
"""

import os


def _get_timing(normal: float, demo: float) -> float:
    """Get timing value - uses demo value if CARDFOLIO_DEMO is set."""
    if os.environ.get("CARDFOLIO_DEMO"):
        return demo
    return normal


# =============================================================================
# TIMING
# =============================================================================

# Normal value / Demo value (seconds)
HINT_BANNER_SECONDS = _get_timing(3.0, 1.0)  # How long the hint banner stays up

# =============================================================================
# APP
# =============================================================================

APP_TITLE = "Cardfolio"

# =============================================================================
# USER-FACING TEXT
# =============================================================================

SAVED_MESSAGE = "Saved successfully!"
MISSING_PREFIX = "Please enter: "

# Shown in the header when a field is blank
NAME_PLACEHOLDER = "Your Name"
HOBBY_PLACEHOLDER = "Your Hobby"

EDITING_STATUS = "Editing"
LOCKED_STATUS = "Locked"

AGE_WARNING = "Age must be a number"
HINT_BANNER_TEXT = "Tip: use the status chip or Edit to change your card"

# Nerd Font icons (https://www.nerdfonts.com/cheat-sheet)
ICON_PERSON = "󰀄"           # nf-md-account
ICON_HEART = "󰋑"            # nf-md-heart
ICON_INFO = "󰋽"             # nf-md-information
ICON_EDIT = "󰏫"             # nf-md-pencil
ICON_LOCK = "󰌾"             # nf-md-lock
ICON_CHECK = "󰄬"            # nf-md-check
ICON_MOON = "󰖙"             # nf-md-weather_night
ICON_SUN = "󰖨"              # nf-md-weather_sunny
