"""Locate, resolve, books and layout command implementations."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from bible_scrubber.core.canon import (
    OLD_TESTAMENT_BOOK_COUNT,
    UnknownBookError,
    chapter_count,
    has_chapter,
    resolve_book_name,
    total_chapters,
)
from bible_scrubber.core.label_layout import compose_panel
from bible_scrubber.core.mapper import (
    book_ranges,
    chapter_position,
    fraction_for_index,
    fraction_for_position,
    global_chapter_index,
    index_for_fraction,
)
from bible_scrubber.models.position import ChapterPosition


def parse_position(book: str, chapter: int = 1) -> ChapterPosition:
    """Build a position from a book name or abbreviation and a chapter number.

    Raises UnknownBookError for an unrecognised book and ValueError for a
    chapter the book does not have.
    """
    name = resolve_book_name(book)
    if name is None:
        raise UnknownBookError(book)
    if not has_chapter(name, chapter):
        raise ValueError(f"{name} has chapters 1-{chapter_count(name)}, not {chapter}")
    return ChapterPosition(book_name=name, chapter_number=chapter)


def execute_locate(book: str, chapter: int, console: Console) -> int:
    """Print the global index and track fraction of a chapter."""
    position = parse_position(book, chapter)
    index = global_chapter_index(position.book_name, position.chapter_number)
    fraction = fraction_for_position(position)

    info_lines = [
        f"[bold]{position}[/]",
        "",
        f"[dim]Global index:[/] {index} of {total_chapters() - 1}",
        f"[dim]Track fraction:[/] {fraction:.6f}",
    ]
    console.print(Panel("\n".join(info_lines), title="Position", border_style="green"))
    return index


def execute_resolve(
    index: int | None,
    fraction: float | None,
    console: Console,
) -> ChapterPosition:
    """Print the chapter at a global index or track fraction."""
    if fraction is not None:
        index = index_for_fraction(fraction)
    if index is None:
        raise ValueError("Provide a global index or --fraction")

    position = chapter_position(index)
    resolved = global_chapter_index(position.book_name, position.chapter_number)

    info_lines = [f"[bold]{position}[/]", ""]
    if resolved != index:
        info_lines.append(f"[yellow]Index {index} clamped to {resolved}[/]")
    info_lines.append(f"[dim]Global index:[/] {resolved}")
    info_lines.append(f"[dim]Track fraction:[/] {fraction_for_index(resolved):.6f}")

    console.print(Panel("\n".join(info_lines), title="Resolved", border_style="green"))
    return position


def execute_books(console: Console) -> None:
    """Print every book with its chapter count and track range."""
    table = Table(title="Canon", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Book", style="white")
    table.add_column("Chapters", justify="right", style="green")
    table.add_column("Start", justify="right", style="dim")
    table.add_column("End", justify="right", style="dim")

    for i, book_range in enumerate(book_ranges()):
        if i == OLD_TESTAMENT_BOOK_COUNT:
            table.add_section()
        table.add_row(
            str(i + 1),
            book_range.name,
            str(chapter_count(book_range.name)),
            f"{book_range.start_fraction:.4f}",
            f"{book_range.end_fraction:.4f}",
        )

    console.print(table)
    console.print(f"[dim]Total chapters:[/] {total_chapters():,}")


def execute_layout(
    height: int,
    gap: int,
    position: ChapterPosition,
    console: Console,
    hovered: int | None = None,
) -> None:
    """Print the decluttered label layout for a track of the given height."""
    frame = compose_panel(
        book_ranges(),
        thumb_fraction=fraction_for_position(position),
        hovered_index=hovered,
        track_height=height,
        track_inset=0,
        min_gap_px=gap,
    )

    console.print(
        Panel(
            "\n".join([
                f"[bold]Thumb at {position}[/]",
                f"[dim]Track height:[/] {height}  [dim]Minimum gap:[/] {gap}",
                f"[dim]Shift:[/] {frame.shift:+.2f}",
                f"[dim]Buffers:[/] {frame.top_buffer:.2f} above, {frame.bottom_buffer:.2f} below",
            ]),
            title="Label Layout",
            border_style="green",
        )
    )

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Book")
    table.add_column("True Y", justify="right", style="dim")
    table.add_column("Label Y", justify="right", style="green")
    table.add_column("Scale", justify="right")

    for label, book_range in zip(frame.labels, book_ranges()):
        name = f"[bold]{label.name}[/]" if label.emphasized else label.name
        table.add_row(
            str(label.index + 1),
            name,
            f"{book_range.mid_fraction * height:.2f}",
            f"{label.y - frame.top_buffer:.2f}",
            f"{label.scale:.1f}",
        )

    console.print(table)
