"""Data models for addressing chapters and verses."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class ChapterPosition(BaseModel):
    """A chapter within the canon, compared by value."""

    model_config = ConfigDict(frozen=True)

    book_name: str
    chapter_number: int

    def __str__(self) -> str:
        return f"{self.book_name} {self.chapter_number}"


class BibleReference(BaseModel):
    """A chapter reference with an optional verse span."""

    model_config = ConfigDict(frozen=True)

    book: str
    chapter: int
    verse_start: int | None = None
    verse_end: int | None = None

    @property
    def display_string(self) -> str:
        if (
            self.verse_start is not None
            and self.verse_end is not None
            and self.verse_start != self.verse_end
        ):
            return f"{self.book} {self.chapter}:{self.verse_start}-{self.verse_end}"
        if self.verse_start is not None:
            return f"{self.book} {self.chapter}:{self.verse_start}"
        return f"{self.book} {self.chapter}"

    @property
    def position(self) -> ChapterPosition:
        return ChapterPosition(book_name=self.book, chapter_number=self.chapter)


@dataclass(frozen=True)
class BookRange:
    """Fraction interval a book occupies on the scrubber track."""

    name: str
    start_fraction: float
    end_fraction: float

    @property
    def mid_fraction(self) -> float:
        return (self.start_fraction + self.end_fraction) / 2

    def contains(self, fraction: float) -> bool:
        return self.start_fraction <= fraction < self.end_fraction
