"""Textual TUI for reading navigation."""

from bible_scrubber.tui.app import ReaderApp
from bible_scrubber.tui.state import ReaderConfig, ScrubberController

__all__ = ["ReaderApp", "ReaderConfig", "ScrubberController"]
