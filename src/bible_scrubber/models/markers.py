"""Data models for highlight, bookmark and note markers."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class MarkerKind(str, Enum):
    """Kind of annotation drawn beside the scrubber track."""

    HIGHLIGHT = "highlight"
    BOOKMARK = "bookmark"
    NOTE = "note"


class HighlightColor(str, Enum):
    """Highlight colours offered by the reader."""

    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PINK = "pink"

    @property
    def scrubber_color(self) -> str:
        """Rich colour used for the marker glyph on the track."""
        return {
            HighlightColor.YELLOW: "yellow",
            HighlightColor.GREEN: "green",
            HighlightColor.BLUE: "dodger_blue1",
            HighlightColor.PINK: "hot_pink",
        }[self]


class Marker(BaseModel):
    """Minimal marker tuple consumed by the track overlay."""

    kind: MarkerKind
    book: str
    chapter: int
    verse: int | None = None
    color: HighlightColor | None = None


class Bookmark(BaseModel):
    """A bookmarked chapter."""

    id: UUID = Field(default_factory=uuid4)
    book: str
    chapter: int
    created_at: datetime = Field(default_factory=datetime.now)

    def to_marker(self) -> Marker:
        return Marker(kind=MarkerKind.BOOKMARK, book=self.book, chapter=self.chapter)
