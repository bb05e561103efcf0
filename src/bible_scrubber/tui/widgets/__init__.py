"""Custom widgets for the reader TUI."""

from bible_scrubber.tui.widgets.label_panel import BookLabelPanel
from bible_scrubber.tui.widgets.reading_pane import ReadingPane
from bible_scrubber.tui.widgets.scrubber import BibleScrubber
from bible_scrubber.tui.widgets.scrubber_track import ScrubberTrack

__all__ = ["BibleScrubber", "BookLabelPanel", "ReadingPane", "ScrubberTrack"]
