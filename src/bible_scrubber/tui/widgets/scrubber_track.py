"""Scrubber track widget: the vertical rail, thumb and marker glyphs."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import events
from textual.widget import Widget

from bible_scrubber.core.markers import MarkerPlacement, place_markers
from bible_scrubber.models.markers import Marker
from bible_scrubber.tui.state import TrackGeometry

if TYPE_CHECKING:
    from bible_scrubber.tui.state import ScrubberController

TRACK_WIDTH = 5
TRACK_COLUMN = 2
RAIL = "│"
THUMB = "●"


class ScrubberTrack(Widget):
    """Thin vertical track mapping rows to positions in the canon."""

    DEFAULT_CSS = """
    ScrubberTrack {
        width: 5;
        height: 1fr;
    }
    """

    def __init__(self, controller: "ScrubberController", inset: int = 1, **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.inset = inset
        self._markers: list[Marker] = []

    @property
    def geometry(self) -> TrackGeometry:
        """Track top and height in rows, plus the track's screen anchor."""
        height = max(0, self.size.height - 2 * self.inset - 1)
        region = self.content_region
        return TrackGeometry(
            top=self.inset,
            height=height,
            anchor_x=region.x,
            anchor_y=region.y,
        )

    def set_markers(self, markers: list[Marker]) -> None:
        self._markers = list(markers)
        self.refresh()

    def marker_placements(self) -> list[MarkerPlacement]:
        geometry = self.geometry
        return place_markers(self._markers, geometry.top, geometry.height)

    def render(self) -> Text:
        rows = self.size.height
        if rows <= 0:
            return Text()

        geometry = self.geometry
        grid = [[(" ", "")] * TRACK_WIDTH for _ in range(rows)]

        for row in range(geometry.top, min(rows, geometry.top + int(geometry.height) + 1)):
            grid[row][TRACK_COLUMN] = (RAIL, "grey50")

        for placement in self.marker_placements():
            column = TRACK_COLUMN + placement.lane
            if 0 <= placement.row < rows and 0 <= column < TRACK_WIDTH:
                grid[placement.row][column] = (placement.glyph, placement.color)

        thumb_row = int(round(geometry.y_for(self.controller.current_fraction)))
        if 0 <= thumb_row < rows:
            style = "bold magenta" if self.controller.is_dragging else "bold cyan"
            grid[thumb_row][TRACK_COLUMN] = (THUMB, style)

        text = Text(no_wrap=True, overflow="crop")
        for i, row in enumerate(grid):
            for char, style in row:
                text.append(char, style=style or None)
            if i < rows - 1:
                text.append("\n")
        return text

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def on_enter(self, event: events.Enter) -> None:
        self.controller.pointer_enter("track")

    def on_leave(self, event: events.Leave) -> None:
        self.controller.pointer_leave("track")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.capture_mouse()
        self.controller.drag_begin(event.y, self.geometry)
        self.refresh()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.controller.is_dragging:
            self.controller.drag_move(event.y, self.geometry)
            self.refresh()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self.release_mouse()
        self.controller.drag_end()
        self.refresh()
