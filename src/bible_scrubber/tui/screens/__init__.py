"""TUI screens for the reader."""

from bible_scrubber.tui.screens.history import HistoryScreen

__all__ = [
    "HistoryScreen",
]
