"""Modal screen listing reading history."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.screen import ModalScreen
from textual.widgets import DataTable, Static

from bible_scrubber.models.history import HistoryEntry
from bible_scrubber.models.position import ChapterPosition


class HistoryScreen(ModalScreen[ChapterPosition | None]):
    """Pick a previously visited chapter to jump back to."""

    BINDINGS = [
        Binding("enter", "open_entry", "Open", show=True, priority=True),
        Binding("escape", "close", "Close", show=True),
    ]

    def __init__(self, entries: list[HistoryEntry], **kwargs) -> None:
        super().__init__(**kwargs)
        self.entries = entries

    def compose(self) -> ComposeResult:
        """Create child widgets."""
        with Container(id="history-dialog"):
            yield Static("[bold]Reading History[/]", id="history-title")
            yield DataTable(id="history-table", cursor_type="row")

    def on_mount(self) -> None:
        table = self.query_one("#history-table", DataTable)
        table.add_column("Reference", key="reference")
        table.add_column("Visited", key="visited", width=18)
        table.zebra_stripes = True

        if not self.entries:
            self.query_one("#history-title", Static).update(
                "[bold]Reading History[/]\n[dim]Nothing visited yet.[/]"
            )
            return

        for i, entry in enumerate(self.entries):
            table.add_row(
                entry.reference,
                entry.timestamp.strftime("%Y-%m-%d %H:%M"),
                key=str(i),
            )
        table.focus()

    def action_open_entry(self) -> None:
        table = self.query_one("#history-table", DataTable)
        row = table.cursor_row
        if not self.entries or row is None or row >= len(self.entries):
            self.dismiss(None)
            return
        self.dismiss(self.entries[row].position)

    def action_close(self) -> None:
        self.dismiss(None)
