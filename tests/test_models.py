from __future__ import annotations

import pytest
from pydantic import ValidationError

from bible_scrubber.models.history import HistoryEntry
from bible_scrubber.models.position import BibleReference, BookRange, ChapterPosition


@pytest.mark.parametrize(
    ("reference", "expected"),
    [
        (BibleReference(book="John", chapter=3, verse_start=16), "John 3:16"),
        (BibleReference(book="John", chapter=3, verse_start=16, verse_end=16), "John 3:16"),
        (BibleReference(book="Romans", chapter=8, verse_start=28, verse_end=30), "Romans 8:28-30"),
        (BibleReference(book="Genesis", chapter=1), "Genesis 1"),
    ],
)
def test_display_string(reference: BibleReference, expected: str) -> None:
    assert reference.display_string == expected


def test_positions_compare_by_value() -> None:
    a = ChapterPosition(book_name="Ruth", chapter_number=2)
    b = ChapterPosition(book_name="Ruth", chapter_number=2)
    assert a == b
    assert len({a, b}) == 1
    assert str(a) == "Ruth 2"


def test_positions_are_immutable() -> None:
    position = ChapterPosition(book_name="Ruth", chapter_number=2)
    with pytest.raises(ValidationError):
        position.chapter_number = 3


def test_reference_position() -> None:
    ref = BibleReference(book="Mark", chapter=4, verse_start=3)
    assert ref.position == ChapterPosition(book_name="Mark", chapter_number=4)


def test_history_entry_from_reference() -> None:
    entry = HistoryEntry.from_reference(BibleReference(book="Mark", chapter=4, verse_start=3))
    assert entry.reference == "Mark 4:3"
    assert entry.verse_end is None
    assert entry.position == ChapterPosition(book_name="Mark", chapter_number=4)


def test_book_range_is_half_open() -> None:
    book = BookRange(name="Ruth", start_fraction=0.2, end_fraction=0.4)
    assert book.contains(0.2)
    assert not book.contains(0.4)
    assert book.mid_fraction == pytest.approx(0.3)
