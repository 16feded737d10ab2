"""
Cardfolio Screens

Textual widgets for each screen of the app. There is one: the card.
"""

from .card_view import CardView

__all__ = ["CardView"]
