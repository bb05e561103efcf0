"""Persisted reader data models."""

from datetime import datetime

from pydantic import BaseModel, Field

from bible_scrubber.models.history import HistoryEntry
from bible_scrubber.models.markers import Bookmark
from bible_scrubber.models.position import ChapterPosition


class StoreMetadata(BaseModel):
    """Metadata written alongside the reader data."""

    saved_at: datetime = Field(default_factory=datetime.now)
    store_version: str = "1.0"


class ReaderData(BaseModel):
    """Everything the reader keeps between sessions."""

    metadata: StoreMetadata = Field(default_factory=StoreMetadata)
    history: list[HistoryEntry] = Field(default_factory=list)  # newest first
    back_positions: list[ChapterPosition] = Field(default_factory=list)  # oldest first
    bookmarks: list[Bookmark] = Field(default_factory=list)
    last_position: ChapterPosition | None = None
