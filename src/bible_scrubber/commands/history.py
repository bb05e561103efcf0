"""History and bookmarks command implementations."""

import questionary
from questionary import Style
from rich.console import Console
from rich.table import Table

from bible_scrubber.models.position import ChapterPosition
from bible_scrubber.store.manager import ReaderStore

# Custom questionary style
PICKER_STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan bold"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("separator", "fg:gray"),
])


def execute_history(
    store: ReaderStore,
    console: Console,
    clear: bool = False,
    pick: bool = False,
) -> ChapterPosition | None:
    """List, clear or pick from reading history.

    Returns the picked position when ``pick`` is set and an entry was chosen.
    """
    if clear:
        count = store.clear_history()
        if count > 0:
            console.print(f"[green]Cleared {count} history entr{'y' if count == 1 else 'ies'}[/]")
        else:
            console.print("[dim]No history to clear[/]")
        return None

    entries = store.history
    if not entries:
        console.print("[dim]No reading history[/]")
        return None

    if pick:
        choices = [
            questionary.Choice(
                title=f"{entry.reference}  ({entry.timestamp:%Y-%m-%d %H:%M})",
                value=entry.position,
            )
            for entry in entries
        ]
        choices.append(questionary.Choice(title="[Quit]", value=None))

        return questionary.select(
            "Open a chapter:",
            choices=choices,
            style=PICKER_STYLE,
            instruction="(Use arrow keys, Enter to select)",
        ).ask()

    table = Table(title="Reading History", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Reference", style="white")
    table.add_column("Visited", style="dim")

    for i, entry in enumerate(entries, start=1):
        table.add_row(str(i), entry.reference, f"{entry.timestamp:%Y-%m-%d %H:%M}")

    console.print(table)
    return None


def execute_bookmarks(store: ReaderStore, console: Console) -> None:
    """List bookmarked chapters."""
    bookmarks = store.bookmarks
    if not bookmarks:
        console.print("[dim]No bookmarks[/]")
        return

    table = Table(title="Bookmarks", show_header=True, header_style="bold cyan")
    table.add_column("Chapter", style="white")
    table.add_column("Added", style="dim")

    for bookmark in bookmarks:
        table.add_row(f"{bookmark.book} {bookmark.chapter}", f"{bookmark.created_at:%Y-%m-%d %H:%M}")

    console.print(table)
