"""Main Textual application for the reader."""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from bible_scrubber.core.canon import BOOK_NAMES, book_index
from bible_scrubber.core.mapper import step_chapter
from bible_scrubber.models.markers import Marker
from bible_scrubber.models.position import BibleReference, ChapterPosition
from bible_scrubber.store.manager import ReaderStore
from bible_scrubber.tui.state import ReaderConfig
from bible_scrubber.tui.widgets.reading_pane import ReadingPane
from bible_scrubber.tui.widgets.scrubber import BibleScrubber

log = logging.getLogger(__name__)


class ReaderApp(App):
    """Chapter navigator with a scrubber over the whole canon."""

    CSS_PATH = "styles.tcss"
    TITLE = "bible-scrubber"

    BINDINGS = [
        Binding("n,right", "next_chapter", "Next", show=True),
        Binding("p,left", "previous_chapter", "Prev", show=True),
        Binding("]", "next_book", "Next Book", show=True),
        Binding("[", "previous_book", "Prev Book", show=True),
        Binding("b", "toggle_bookmark", "Bookmark", show=True),
        Binding("u", "go_back", "Back", show=True),
        Binding("h", "show_history", "History", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        position: ChapterPosition | None = None,
        config: ReaderConfig | None = None,
        store: ReaderStore | None = None,
        markers: list[Marker] | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self.config = config or ReaderConfig()
        self.store = store or ReaderStore(
            self.config.data_dir,
            max_history=self.config.max_history,
            max_back=self.config.max_back,
        )
        self.position = (
            position
            or self.store.last_position
            or ChapterPosition(book_name=BOOK_NAMES[0], chapter_number=1)
        )
        self.external_markers = list(markers or [])
        self._drag_origin: ChapterPosition | None = None

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        yield Header()
        yield BibleScrubber(
            self.position,
            config=self.config,
            markers=self._all_markers(),
            id="scrubber",
        )
        yield ReadingPane(id="reading-pane")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_reading_pane()

    def _all_markers(self) -> list[Marker]:
        return self.external_markers + [b.to_marker() for b in self.store.bookmarks]

    def _refresh_reading_pane(self) -> None:
        self.sub_title = str(self.position)
        self.query_one("#reading-pane", ReadingPane).show(
            self.position,
            bookmarked=self.store.is_bookmarked(self.position),
            markers=self.external_markers,
        )

    def navigate_to(
        self,
        position: ChapterPosition,
        record_history: bool = True,
        push_back: bool = True,
        persist: bool = True,
    ) -> None:
        """Show a chapter and keep the scrubber, history and back stack in step.

        With ``persist`` off the new position is only written to disk later,
        when the drag that produced it ends or the app quits.
        """
        if position == self.position:
            return

        log.debug("Navigating from %s to %s", self.position, position)
        if push_back:
            self.store.push_back(self.position)
        if record_history:
            self.store.add_history(
                BibleReference(book=position.book_name, chapter=position.chapter_number)
            )

        self.position = position
        if persist:
            self.store.remember_position(position)
        self.query_one("#scrubber", BibleScrubber).set_position(position)
        self._refresh_reading_pane()

    def on_bible_scrubber_navigate(self, message: BibleScrubber.Navigate) -> None:
        if not message.dragging:
            self.navigate_to(message.position)
            return

        # Drag steps are recorded once, when the gesture ends.
        if self._drag_origin is None:
            self._drag_origin = self.position
        self.navigate_to(message.position, record_history=False, push_back=False, persist=False)

    def on_bible_scrubber_drag_ended(self, message: BibleScrubber.DragEnded) -> None:
        origin, self._drag_origin = self._drag_origin, None
        if origin is None or origin == self.position:
            return
        self.store.push_back(origin)
        self.store.remember_position(self.position)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def _step(self, delta: int) -> None:
        target = step_chapter(self.position, delta)
        if target is None:
            self.bell()
            return
        self.navigate_to(target, record_history=False, push_back=False)

    def action_next_chapter(self) -> None:
        self._step(1)

    def action_previous_chapter(self) -> None:
        self._step(-1)

    def _step_book(self, delta: int) -> None:
        idx = book_index(self.position.book_name) + delta
        if not 0 <= idx < len(BOOK_NAMES):
            self.bell()
            return
        self.navigate_to(ChapterPosition(book_name=BOOK_NAMES[idx], chapter_number=1))

    def action_next_book(self) -> None:
        self._step_book(1)

    def action_previous_book(self) -> None:
        self._step_book(-1)

    def action_toggle_bookmark(self) -> None:
        added = self.store.toggle_bookmark(self.position)
        self.query_one("#scrubber", BibleScrubber).set_markers(self._all_markers())
        self._refresh_reading_pane()
        self.notify(f"{'Bookmarked' if added else 'Removed bookmark'}: {self.position}")

    def action_go_back(self) -> None:
        previous = self.store.pop_back()
        if previous is None:
            self.notify("Nothing to go back to.", severity="warning")
            return
        self.navigate_to(previous, record_history=False, push_back=False)

    def action_show_history(self) -> None:
        from bible_scrubber.tui.screens.history import HistoryScreen

        def open_selected(position: ChapterPosition | None) -> None:
            if position is not None:
                self.navigate_to(position, record_history=False)

        self.push_screen(HistoryScreen(self.store.history), open_selected)

    def action_quit(self) -> None:
        """Quit the application."""
        self.store.remember_position(self.position)
        self.exit(0)
