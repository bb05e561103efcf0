from __future__ import annotations

import logging

import pytest

from bible_scrubber.core.mapper import fraction_for_index, global_chapter_index
from bible_scrubber.core.markers import LANE_OFFSETS, marker_color, place_markers
from bible_scrubber.models.markers import HighlightColor, Marker, MarkerKind


def test_markers_land_on_their_chapter_fraction() -> None:
    markers = [
        Marker(kind=MarkerKind.HIGHLIGHT, book="Genesis", chapter=1),
        Marker(kind=MarkerKind.NOTE, book="Revelation", chapter=22),
        Marker(kind=MarkerKind.BOOKMARK, book="John", chapter=3),
    ]
    placed = place_markers(markers, track_top=2, track_height=100)

    assert [p.fraction for p in placed] == [
        0.0,
        1.0,
        pytest.approx(fraction_for_index(global_chapter_index("John", 3))),
    ]
    assert placed[0].y == 2
    assert placed[1].y == 102


def test_each_kind_has_its_own_lane() -> None:
    markers = [Marker(kind=kind, book="Psalms", chapter=23) for kind in MarkerKind]
    placed = place_markers(markers, 0, 40)
    assert len(placed) == 3
    assert {p.lane for p in placed} == set(LANE_OFFSETS.values())
    assert len({p.row for p in placed}) == 1
    assert [p.glyph for p in placed] == ["▪", "◆", "✎"]


def test_markers_sharing_a_lane_and_row_are_drawn_once() -> None:
    markers = [
        Marker(kind=MarkerKind.HIGHLIGHT, book="Genesis", chapter=1),
        Marker(kind=MarkerKind.HIGHLIGHT, book="Genesis", chapter=2),
        Marker(kind=MarkerKind.HIGHLIGHT, book="Revelation", chapter=1),
    ]
    placed = place_markers(markers, 0, 10)
    assert len(placed) == 2
    assert placed[0].row == 0
    assert placed[1].row == 10


def test_unknown_books_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    markers = [
        Marker(kind=MarkerKind.NOTE, book="Hezekiah", chapter=1),
        Marker(kind=MarkerKind.NOTE, book="Ruth", chapter=1),
    ]
    with caplog.at_level(logging.WARNING):
        placed = place_markers(markers, 0, 40)
    assert len(placed) == 1
    assert "Hezekiah" in caplog.text


def test_no_markers() -> None:
    assert place_markers([], 0, 40) == []


def test_marker_colors() -> None:
    pink = Marker(kind=MarkerKind.HIGHLIGHT, book="Ruth", chapter=1, color=HighlightColor.PINK)
    plain = Marker(kind=MarkerKind.HIGHLIGHT, book="Ruth", chapter=1)
    note = Marker(kind=MarkerKind.NOTE, book="Ruth", chapter=1, color=HighlightColor.PINK)
    assert marker_color(pink) == "hot_pink"
    assert marker_color(plain) == "yellow"
    assert marker_color(note) == "cyan"
