"""Data models for reading history."""

from datetime import datetime

from pydantic import BaseModel, Field

from bible_scrubber.models.position import BibleReference, ChapterPosition


class HistoryEntry(BaseModel):
    """A visited reference, newest entries first in the store."""

    reference: str
    book_name: str
    chapter: int
    verse_start: int | None = None
    verse_end: int | None = None
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def from_reference(cls, ref: BibleReference) -> "HistoryEntry":
        return cls(
            reference=ref.display_string,
            book_name=ref.book,
            chapter=ref.chapter,
            verse_start=ref.verse_start,
            verse_end=ref.verse_end,
        )

    @property
    def position(self) -> ChapterPosition:
        return ChapterPosition(book_name=self.book_name, chapter_number=self.chapter)

