"""
Cardfolio - A Digital Business Card

A Textual TUI application providing:
- Card Form: name, hobby and age with edit/lock states
- Save feedback: toast notifications and a short-lived hint banner
- Light and dark card themes

Keyboard-first, single screen, nothing saved to disk.
"""

__version__ = "1.0.0"
