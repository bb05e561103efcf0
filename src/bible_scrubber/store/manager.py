"""Persistence of reading history, the back stack and bookmarks."""

import logging
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from bible_scrubber.models.history import HistoryEntry
from bible_scrubber.models.markers import Bookmark, Marker
from bible_scrubber.models.position import BibleReference, ChapterPosition
from bible_scrubber.store.models import ReaderData, StoreMetadata

log = logging.getLogger(__name__)

_MARKER_LIST = TypeAdapter(list[Marker])


def load_markers(path: Path) -> list[Marker]:
    """Load a JSON array of markers exported by the annotation collaborators."""
    return _MARKER_LIST.validate_json(path.read_bytes())


class ReaderStore:
    """Manages the reader's JSON data file."""

    DATA_FILE = "reader.json"
    STORE_VERSION = "1.0"

    def __init__(self, data_dir: Path, max_history: int = 100, max_back: int = 20):
        self.data_dir = data_dir
        self.data_path = data_dir / self.DATA_FILE
        self.max_history = max_history
        self.max_back = max_back
        self._data: ReaderData | None = None

    def _ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    def _load(self) -> ReaderData:
        """Load or create reader data."""
        if self._data is not None:
            return self._data

        if self.data_path.exists():
            try:
                self._data = ReaderData.model_validate_json(self.data_path.read_bytes())
            except (OSError, ValidationError) as e:
                log.warning("Ignoring unreadable reader data at %s: %s", self.data_path, e)
                self._data = ReaderData()
        else:
            self._data = ReaderData()

        return self._data

    def _save(self) -> None:
        """Write reader data to disk."""
        self._ensure_data_dir()
        data = self._load()
        data.metadata = StoreMetadata(saved_at=datetime.now(), store_version=self.STORE_VERSION)
        self.data_path.write_text(data.model_dump_json(indent=2))

    # History -------------------------------------------------------------

    @property
    def history(self) -> list[HistoryEntry]:
        return list(self._load().history)

    def add_history(self, ref: BibleReference) -> HistoryEntry:
        """Record a visit at the front of the history, trimming the oldest."""
        data = self._load()
        entry = HistoryEntry.from_reference(ref)
        data.history.insert(0, entry)
        del data.history[self.max_history:]
        self._save()
        return entry

    def clear_history(self) -> int:
        """Clear history. Returns number of entries removed."""
        data = self._load()
        count = len(data.history)
        data.history.clear()
        self._save()
        return count

    # Back stack ----------------------------------------------------------

    def push_back(self, position: ChapterPosition) -> None:
        data = self._load()
        data.back_positions.append(position)
        overflow = len(data.back_positions) - self.max_back
        if overflow > 0:
            del data.back_positions[:overflow]
        self._save()

    def pop_back(self) -> ChapterPosition | None:
        data = self._load()
        if not data.back_positions:
            return None
        position = data.back_positions.pop()
        self._save()
        return position

    def clear_back(self) -> None:
        self._load().back_positions.clear()
        self._save()

    # Bookmarks -----------------------------------------------------------

    @property
    def bookmarks(self) -> list[Bookmark]:
        return list(self._load().bookmarks)

    def is_bookmarked(self, position: ChapterPosition) -> bool:
        return any(
            b.book == position.book_name and b.chapter == position.chapter_number
            for b in self._load().bookmarks
        )

    def toggle_bookmark(self, position: ChapterPosition) -> bool:
        """Add or remove a bookmark. Returns True if the chapter is now bookmarked."""
        data = self._load()
        for i, bookmark in enumerate(data.bookmarks):
            if bookmark.book == position.book_name and bookmark.chapter == position.chapter_number:
                del data.bookmarks[i]
                self._save()
                return False

        data.bookmarks.append(Bookmark(book=position.book_name, chapter=position.chapter_number))
        self._save()
        return True

    # Last position -------------------------------------------------------

    @property
    def last_position(self) -> ChapterPosition | None:
        return self._load().last_position

    def remember_position(self, position: ChapterPosition) -> None:
        data = self._load()
        if data.last_position == position:
            return
        data.last_position = position
        self._save()
