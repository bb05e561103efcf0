"""Floating panel of book labels shown beside the scrubber track."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual import events
from textual.widget import Widget

from bible_scrubber.core.label_layout import LabelPlacement, PanelFrame

if TYPE_CHECKING:
    from bible_scrubber.tui.state import ScrubberController


def label_style(label: LabelPlacement) -> str:
    """Terminal stand-in for label scale: bigger labels read louder."""
    if label.scale >= 2.0:
        return "bold reverse"
    if label.emphasized or label.scale > 1.3:
        return "bold"
    if label.scale > 1.0:
        return ""
    return "dim"


class BookLabelPanel(Widget):
    """Presents a PanelFrame; hidden until the scrubber is hovered or dragged."""

    DEFAULT_CSS = """
    BookLabelPanel {
        width: 18;
        height: 1fr;
        visibility: hidden;
    }
    """

    def __init__(self, controller: "ScrubberController", **kwargs) -> None:
        super().__init__(**kwargs)
        self.controller = controller
        self.frame: PanelFrame | None = None

    @property
    def is_presented(self) -> bool:
        return self.frame is not None

    def present(self, frame: PanelFrame) -> None:
        self.frame = frame
        self.styles.visibility = "visible"
        self.refresh()

    def dismiss(self) -> None:
        self.frame = None
        self.styles.visibility = "hidden"
        self.refresh()

    def _row_of(self, label: LabelPlacement) -> int:
        # The panel's top edge is level with the track's, so buffer rows above
        # the anchor fall outside the terminal and are clipped.
        assert self.frame is not None
        return int(round(label.y - self.frame.top_buffer))

    def label_index_at(self, row: int) -> int | None:
        if self.frame is None:
            return None
        for label in self.frame.labels:
            if self._row_of(label) == row:
                return label.index
        return None

    def render(self) -> Text:
        rows = self.size.height
        width = self.size.width
        if self.frame is None or rows <= 0:
            return Text()

        lines: list[Text] = [Text() for _ in range(rows)]
        for label in self.frame.labels:
            row = self._row_of(label)
            if not 0 <= row < rows or lines[row].plain:
                continue
            lines[row] = Text(label.name[:width].rjust(width), style=label_style(label))

        return Text("\n").join(lines)

    # ------------------------------------------------------------------
    # Pointer events
    # ------------------------------------------------------------------

    def on_enter(self, event: events.Enter) -> None:
        if self.frame is not None:
            self.controller.pointer_enter("panel")

    def on_leave(self, event: events.Leave) -> None:
        self.controller.pointer_leave("panel")

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.frame is None:
            return
        index = self.label_index_at(event.y)
        if index != self.controller.hovered_book_index:
            self.controller.hover_book(index)

    def on_click(self, event: events.Click) -> None:
        if self.frame is None:
            return
        index = self.label_index_at(event.y)
        if index is not None:
            self.controller.tap_book(self.frame.labels[index].name)
