"""Main CLI application."""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from bible_scrubber.commands.navigate import parse_position
from bible_scrubber.store.manager import ReaderStore
from bible_scrubber.tui.state import ReaderConfig, default_data_dir

app = typer.Typer(
    name="bible-scrubber",
    help="Navigate the 1,189 chapters of the Bible with a scrubber track.",
    add_completion=False,
)

console = Console()

DataDirOption = Annotated[
    Optional[Path],
    typer.Option(
        "--data-dir",
        help="Directory for history and bookmarks (default: ~/.bible_scrubber)",
    ),
]


def _store(data_dir: Path | None) -> ReaderStore:
    return ReaderStore((data_dir or default_data_dir()).expanduser())


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """Navigate the 1,189 chapters of the Bible with a scrubber track."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def read(
    book: Annotated[
        Optional[str],
        typer.Argument(help="Book name or abbreviation (default: last position)"),
    ] = None,
    chapter: Annotated[
        int,
        typer.Argument(help="Chapter number", min=1),
    ] = 1,
    markers: Annotated[
        Optional[Path],
        typer.Option(
            "--markers",
            "-m",
            help="JSON file of highlight/bookmark/note markers to show on the track",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ] = None,
    data_dir: DataDirOption = None,
    label_gap: Annotated[
        int,
        typer.Option("--label-gap", help="Minimum rows between book labels", min=0),
    ] = 1,
) -> None:
    """Open the reader with the chapter scrubber."""
    try:
        from bible_scrubber.commands.read import execute_read

        position = parse_position(book, chapter) if book else None
        config = ReaderConfig(min_label_gap=label_gap, markers_file=markers)
        if data_dir is not None:
            config.data_dir = data_dir.expanduser()

        execute_read(position=position, config=config, console=console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def locate(
    book: Annotated[str, typer.Argument(help="Book name or abbreviation")],
    chapter: Annotated[int, typer.Argument(help="Chapter number", min=1)] = 1,
) -> None:
    """Show the global chapter index and track fraction of a chapter."""
    try:
        from bible_scrubber.commands.navigate import execute_locate

        execute_locate(book, chapter, console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def resolve(
    index: Annotated[
        Optional[int],
        typer.Argument(help="0-based global chapter index (out-of-range values clamp)"),
    ] = None,
    fraction: Annotated[
        Optional[float],
        typer.Option("--fraction", "-f", help="Track fraction in [0, 1] instead of an index"),
    ] = None,
) -> None:
    """Show the chapter at a global index or track fraction."""
    try:
        from bible_scrubber.commands.navigate import execute_resolve

        execute_resolve(index, fraction, console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def books() -> None:
    """List the canon with chapter counts and track ranges."""
    from bible_scrubber.commands.navigate import execute_books

    execute_books(console)


@app.command()
def layout(
    height: Annotated[
        int,
        typer.Option("--height", "-H", help="Track height in rows", min=0),
    ] = 40,
    gap: Annotated[
        int,
        typer.Option("--gap", "-g", help="Minimum rows between labels", min=0),
    ] = 1,
    book: Annotated[
        str,
        typer.Option("--book", "-b", help="Book holding the thumb"),
    ] = "Genesis",
    chapter: Annotated[
        int,
        typer.Option("--chapter", "-c", help="Chapter holding the thumb", min=1),
    ] = 1,
) -> None:
    """Print the decluttered book-label layout for a track height."""
    try:
        from bible_scrubber.commands.navigate import execute_layout

        execute_layout(height, gap, parse_position(book, chapter), console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def history(
    clear: Annotated[
        bool,
        typer.Option("--clear", help="Delete all history entries"),
    ] = False,
    pick: Annotated[
        bool,
        typer.Option("--pick", "-p", help="Choose an entry and open it in the reader"),
    ] = False,
    data_dir: DataDirOption = None,
) -> None:
    """Show reading history."""
    try:
        from bible_scrubber.commands.history import execute_history

        position = execute_history(_store(data_dir), console, clear=clear, pick=pick)
        if position is not None:
            from bible_scrubber.commands.read import execute_read

            config = ReaderConfig()
            if data_dir is not None:
                config.data_dir = data_dir.expanduser()
            execute_read(position=position, config=config, console=console)
    except Exception as e:
        console.print(f"[red]Error: {e}[/]")
        raise typer.Exit(1)


@app.command()
def bookmarks(data_dir: DataDirOption = None) -> None:
    """List bookmarked chapters."""
    from bible_scrubber.commands.history import execute_bookmarks

    execute_bookmarks(_store(data_dir), console)


if __name__ == "__main__":
    app()
