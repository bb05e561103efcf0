from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from bible_scrubber.models.markers import HighlightColor, MarkerKind
from bible_scrubber.models.position import BibleReference, ChapterPosition
from bible_scrubber.store.manager import ReaderStore, load_markers


def chapter(book: str, number: int) -> ChapterPosition:
    return ChapterPosition(book_name=book, chapter_number=number)


@pytest.fixture
def store(tmp_path: Path) -> ReaderStore:
    return ReaderStore(tmp_path / "data")


def test_empty_store(store: ReaderStore) -> None:
    assert store.history == []
    assert store.bookmarks == []
    assert store.last_position is None
    assert store.pop_back() is None
    assert not store.data_path.exists()


def test_history_is_newest_first_and_capped(tmp_path: Path) -> None:
    store = ReaderStore(tmp_path, max_history=100)
    for number in range(1, 151):
        store.add_history(BibleReference(book="Psalms", chapter=number))

    history = store.history
    assert len(history) == 100
    assert history[0].reference == "Psalms 150"
    assert history[-1].reference == "Psalms 51"


def test_history_keeps_verse_span(store: ReaderStore) -> None:
    entry = store.add_history(
        BibleReference(book="Romans", chapter=8, verse_start=28, verse_end=30)
    )
    assert entry.reference == "Romans 8:28-30"
    assert entry.position == chapter("Romans", 8)


def test_clear_history(store: ReaderStore) -> None:
    store.add_history(BibleReference(book="Ruth", chapter=1))
    store.add_history(BibleReference(book="Ruth", chapter=2))
    assert store.clear_history() == 2
    assert store.history == []
    assert store.clear_history() == 0


def test_back_stack_is_lifo_and_capped(tmp_path: Path) -> None:
    store = ReaderStore(tmp_path, max_back=20)
    for number in range(1, 26):
        store.push_back(chapter("Isaiah", number))

    popped = []
    while (position := store.pop_back()) is not None:
        popped.append(position.chapter_number)

    assert popped == list(range(25, 5, -1))


def test_clear_back(store: ReaderStore) -> None:
    store.push_back(chapter("Mark", 1))
    store.clear_back()
    assert store.pop_back() is None


def test_toggle_bookmark(store: ReaderStore) -> None:
    john = chapter("John", 3)
    assert store.toggle_bookmark(john) is True
    assert store.is_bookmarked(john)
    assert store.bookmarks[0].to_marker().kind is MarkerKind.BOOKMARK

    assert store.toggle_bookmark(john) is False
    assert not store.is_bookmarked(john)
    assert store.bookmarks == []


def test_data_survives_a_new_store(tmp_path: Path) -> None:
    first = ReaderStore(tmp_path)
    first.add_history(BibleReference(book="Acts", chapter=2))
    first.push_back(chapter("Acts", 1))
    first.toggle_bookmark(chapter("Acts", 2))
    first.remember_position(chapter("Acts", 2))

    second = ReaderStore(tmp_path)
    assert [e.reference for e in second.history] == ["Acts 2"]
    assert second.is_bookmarked(chapter("Acts", 2))
    assert second.last_position == chapter("Acts", 2)
    assert second.pop_back() == chapter("Acts", 1)

    saved = json.loads((tmp_path / ReaderStore.DATA_FILE).read_text())
    assert saved["metadata"]["store_version"] == "1.0"


def test_corrupt_file_starts_fresh(tmp_path: Path) -> None:
    (tmp_path / ReaderStore.DATA_FILE).write_text("{not json")
    store = ReaderStore(tmp_path)
    assert store.history == []

    store.add_history(BibleReference(book="Jude", chapter=1))
    assert ReaderStore(tmp_path).history[0].reference == "Jude 1"


def test_undecodable_file_starts_fresh(tmp_path: Path) -> None:
    (tmp_path / ReaderStore.DATA_FILE).write_bytes(b"\xff\xfe{garbage")
    store = ReaderStore(tmp_path)
    assert store.history == []
    assert store.last_position is None

    store.toggle_bookmark(chapter("Jude", 1))
    assert ReaderStore(tmp_path).is_bookmarked(chapter("Jude", 1))


def test_load_markers(tmp_path: Path) -> None:
    path = tmp_path / "markers.json"
    path.write_text(
        json.dumps([
            {"kind": "highlight", "book": "Psalms", "chapter": 23, "verse": 1, "color": "green"},
            {"kind": "note", "book": "Mark", "chapter": 4},
        ])
    )
    markers = load_markers(path)
    assert [m.kind for m in markers] == [MarkerKind.HIGHLIGHT, MarkerKind.NOTE]
    assert markers[0].color is HighlightColor.GREEN
    assert markers[1].verse is None


def test_load_markers_rejects_bad_kind(tmp_path: Path) -> None:
    path = tmp_path / "markers.json"
    path.write_text('[{"kind": "sticker", "book": "Mark", "chapter": 4}]')
    with pytest.raises(ValidationError):
        load_markers(path)


def test_default_data_dir_honours_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    from bible_scrubber.tui.state import default_data_dir

    monkeypatch.setenv("BIBLE_SCRUBBER_HOME", str(tmp_path / "home"))
    assert default_data_dir() == tmp_path / "home"

    monkeypatch.delenv("BIBLE_SCRUBBER_HOME")
    assert default_data_dir() == Path.home() / ".bible_scrubber"
