"""Reading pane summarising the chapter currently shown."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text
from textual.widgets import Static

from bible_scrubber.core.canon import (
    OLD_TESTAMENT_BOOK_COUNT,
    book_index,
    chapter_count,
    total_chapters,
)
from bible_scrubber.core.mapper import fraction_for_position, global_chapter_index
from bible_scrubber.models.markers import Marker, MarkerKind
from bible_scrubber.models.position import ChapterPosition


class ReadingPane(Static):
    """Shows where the reader is; verse text comes from the text collaborator."""

    DEFAULT_CSS = """
    ReadingPane {
        width: 1fr;
        height: 1fr;
        padding: 1 2;
    }
    """

    def show(
        self,
        position: ChapterPosition,
        bookmarked: bool = False,
        markers: list[Marker] | None = None,
    ) -> None:
        idx = book_index(position.book_name)
        testament = "Old Testament" if idx < OLD_TESTAMENT_BOOK_COUNT else "New Testament"
        global_index = global_chapter_index(position.book_name, position.chapter_number)

        title = Text(str(position), style="bold")
        if bookmarked:
            title.append("  ◆", style="red")

        info = Table.grid(padding=(0, 2))
        info.add_column(style="dim")
        info.add_column()
        info.add_row("Testament", testament)
        info.add_row(
            "Chapter",
            f"{position.chapter_number} of {chapter_count(position.book_name)}",
        )
        info.add_row("Canon", f"{global_index + 1:,} of {total_chapters():,}")
        info.add_row("Progress", f"{fraction_for_position(position):.1%}")

        here = [
            m for m in markers or []
            if m.book == position.book_name and m.chapter == position.chapter_number
        ]
        highlights = sum(1 for m in here if m.kind is MarkerKind.HIGHLIGHT)
        notes = sum(1 for m in here if m.kind is MarkerKind.NOTE)
        if highlights or notes:
            info.add_row("Annotations", f"{highlights} highlight(s), {notes} note(s)")

        grid = Table.grid()
        grid.add_row(title)
        grid.add_row("")
        grid.add_row(info)
        self.update(grid)
