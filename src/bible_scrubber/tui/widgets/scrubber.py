"""Bible scrubber: track, label panel and the controller that ties them together."""

from __future__ import annotations

import logging

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message

from bible_scrubber.core.label_layout import compose_panel
from bible_scrubber.core.mapper import book_ranges
from bible_scrubber.models.markers import Marker
from bible_scrubber.models.position import ChapterPosition
from bible_scrubber.tui.state import (
    ReaderConfig,
    RelayoutScheduler,
    ScrubberController,
    ScrubberSnapshot,
)
from bible_scrubber.tui.widgets.label_panel import BookLabelPanel
from bible_scrubber.tui.widgets.scrubber_track import TRACK_WIDTH, ScrubberTrack

log = logging.getLogger(__name__)


class BibleScrubber(Horizontal):
    """Scroll-track navigator over all 1,189 chapters."""

    DEFAULT_CSS = """
    BibleScrubber {
        width: auto;
        height: 1fr;
        dock: right;
    }
    """

    class Navigate(Message):
        """Posted when the scrubber asks the reader to show a chapter."""

        def __init__(self, position: ChapterPosition, dragging: bool) -> None:
            super().__init__()
            self.position = position
            self.dragging = dragging

    class DragEnded(Message):
        """Posted when a drag gesture on the track finishes."""

    def __init__(
        self,
        position: ChapterPosition,
        config: ReaderConfig | None = None,
        markers: list[Marker] | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.config = config or ReaderConfig()
        self.controller = ScrubberController(
            self._navigate, position=position, on_drag_end=self._drag_ended
        )
        self.scheduler = RelayoutScheduler(self.call_after_refresh)
        self.track = ScrubberTrack(self.controller, inset=self.config.track_inset, id="scrubber-track")
        self.panel = BookLabelPanel(self.controller, id="label-panel")
        self.panel.styles.width = self.config.panel_width
        self._initial_markers = markers or []
        self._unsubscribe = self.controller.subscribe(self._on_snapshot)

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield self.panel
        yield self.track

    def on_mount(self) -> None:
        self.styles.width = self.config.panel_width + TRACK_WIDTH
        self.track.set_markers(self._initial_markers)

    def on_unmount(self) -> None:
        self._unsubscribe()
        self.scheduler.cancel()

    # ------------------------------------------------------------------
    # Host-facing API
    # ------------------------------------------------------------------

    def set_position(self, position: ChapterPosition) -> None:
        """Follow the chapter visible in the reading pane."""
        self.controller.set_position(position)
        self.track.refresh()

    def set_markers(self, markers: list[Marker]) -> None:
        self.track.set_markers(markers)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _navigate(self, position: ChapterPosition) -> None:
        self.post_message(self.Navigate(position, dragging=self.controller.is_dragging))

    def _drag_ended(self) -> None:
        self.post_message(self.DragEnded())

    def _on_snapshot(self, snapshot: ScrubberSnapshot) -> None:
        self.track.refresh()
        self.scheduler.request(self._relayout)

    def _relayout(self) -> None:
        """Recompute label placement from post-layout geometry."""
        if not self.controller.labels_visible:
            self.panel.dismiss()
            return

        geometry = self.track.geometry
        panel_region = self.panel.content_region
        frame = compose_panel(
            book_ranges(),
            thumb_fraction=self.controller.current_fraction,
            hovered_index=self.controller.hovered_book_index,
            track_height=geometry.height,
            track_inset=geometry.top,
            min_gap_px=self.config.min_label_gap,
            anchor=(panel_region.x, panel_region.y),
            width=self.config.panel_width,
        )
        log.debug("Label panel shift %.2f rows, buffers %.2f/%.2f",
                  frame.shift, frame.top_buffer, frame.bottom_buffer)
        self.panel.present(frame)
