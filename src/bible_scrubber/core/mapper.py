"""Mapping between chapter positions, global chapter indices and track fractions."""

from __future__ import annotations

import math
from functools import cache

from bible_scrubber.core.canon import (
    BOOK_NAMES,
    CHAPTER_COUNTS,
    UnknownBookError,
    book_index,
    chapter_count,
    total_chapters,
)
from bible_scrubber.models.position import BookRange, ChapterPosition


def global_chapter_index(book: str, chapter: int) -> int:
    """Return the 0-based index of a chapter across the whole canon.

    Raises UnknownBookError for a book outside the canon. The chapter number
    is not range-checked, so callers validate it with ``has_chapter`` first.
    """
    index = 0
    for name in BOOK_NAMES:
        if name == book:
            return index + chapter - 1
        index += CHAPTER_COUNTS[name]
    raise UnknownBookError(book)


def chapter_position(global_index: int) -> ChapterPosition:
    """Return the chapter at a global index, clamping out-of-range input."""
    clamped = max(0, min(global_index, total_chapters() - 1))
    index = 0
    for name in BOOK_NAMES:
        count = CHAPTER_COUNTS[name]
        if clamped < index + count:
            return ChapterPosition(book_name=name, chapter_number=clamped - index + 1)
        index += count
    # Unreachable with the static table, kept total for the type checker.
    return ChapterPosition(book_name=BOOK_NAMES[-1], chapter_number=CHAPTER_COUNTS[BOOK_NAMES[-1]])


def clamp_fraction(fraction: float) -> float:
    return min(1.0, max(0.0, fraction))


def fraction_for_index(global_index: int) -> float:
    """Normalize a global index to a track fraction in [0, 1]."""
    return global_index / max(1, total_chapters() - 1)


def fraction_for_position(position: ChapterPosition) -> float:
    return fraction_for_index(
        global_chapter_index(position.book_name, position.chapter_number)
    )


def index_for_fraction(fraction: float) -> int:
    """Nearest global index for a track fraction, rounding halves up."""
    scaled = clamp_fraction(fraction) * (total_chapters() - 1)
    return int(math.floor(scaled + 0.5))


def position_for_fraction(fraction: float) -> ChapterPosition:
    return chapter_position(index_for_fraction(fraction))


@cache
def book_ranges() -> tuple[BookRange, ...]:
    """Partition [0, 1] into one range per book, sized by chapter count."""
    total = total_chapters()
    offset = 0
    ranges = []
    for name in BOOK_NAMES:
        count = CHAPTER_COUNTS[name]
        ranges.append(
            BookRange(
                name=name,
                start_fraction=offset / total,
                end_fraction=(offset + count) / total,
            )
        )
        offset += count
    return tuple(ranges)


def book_index_for_fraction(fraction: float) -> int:
    """Index of the book range containing a fraction; 1.0 maps to the last book."""
    ranges = book_ranges()
    for i, book_range in enumerate(ranges):
        if book_range.contains(fraction):
            return i
    return 0 if fraction < 0 else len(ranges) - 1


def chapter_after(position: ChapterPosition) -> ChapterPosition | None:
    """Next chapter, continuing into the following book."""
    if position.chapter_number < chapter_count(position.book_name):
        return ChapterPosition(
            book_name=position.book_name,
            chapter_number=position.chapter_number + 1,
        )
    idx = book_index(position.book_name)
    if idx + 1 >= len(BOOK_NAMES):
        return None
    return ChapterPosition(book_name=BOOK_NAMES[idx + 1], chapter_number=1)


def chapter_before(position: ChapterPosition) -> ChapterPosition | None:
    """Previous chapter, landing on the last chapter of the preceding book."""
    if position.chapter_number > 1:
        return ChapterPosition(
            book_name=position.book_name,
            chapter_number=position.chapter_number - 1,
        )
    idx = book_index(position.book_name)
    if idx == 0:
        return None
    previous = BOOK_NAMES[idx - 1]
    return ChapterPosition(book_name=previous, chapter_number=CHAPTER_COUNTS[previous])


def step_chapter(position: ChapterPosition, delta: int) -> ChapterPosition | None:
    """Move ``delta`` chapters forward or back; None when the canon ends first."""
    current: ChapterPosition | None = position
    step = chapter_after if delta > 0 else chapter_before
    for _ in range(abs(delta)):
        if current is None:
            break
        current = step(current)
    return current
