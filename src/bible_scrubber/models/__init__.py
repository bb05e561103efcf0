"""Data models."""

from bible_scrubber.models.history import HistoryEntry
from bible_scrubber.models.markers import (
    Bookmark,
    HighlightColor,
    Marker,
    MarkerKind,
)
from bible_scrubber.models.position import (
    BibleReference,
    BookRange,
    ChapterPosition,
)

__all__ = [
    # Position models
    "ChapterPosition",
    "BibleReference",
    "BookRange",
    # Marker models
    "MarkerKind",
    "HighlightColor",
    "Marker",
    "Bookmark",
    # History models
    "HistoryEntry",
]
