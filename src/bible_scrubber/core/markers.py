"""Placement of highlight, bookmark and note markers along the scrubber track."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from bible_scrubber.core.canon import UnknownBookError
from bible_scrubber.core.mapper import fraction_for_index, global_chapter_index
from bible_scrubber.models.markers import Marker, MarkerKind

log = logging.getLogger(__name__)

# Lateral offset from the track column, in cells. Highlights sit left of the
# track; bookmarks and notes sit right of it in separate lanes.
LANE_OFFSETS: dict[MarkerKind, int] = {
    MarkerKind.HIGHLIGHT: -1,
    MarkerKind.BOOKMARK: 1,
    MarkerKind.NOTE: 2,
}

GLYPHS: dict[MarkerKind, str] = {
    MarkerKind.HIGHLIGHT: "▪",
    MarkerKind.BOOKMARK: "◆",
    MarkerKind.NOTE: "✎",
}

DEFAULT_COLORS: dict[MarkerKind, str] = {
    MarkerKind.HIGHLIGHT: "yellow",
    MarkerKind.BOOKMARK: "red",
    MarkerKind.NOTE: "cyan",
}


@dataclass(frozen=True)
class MarkerPlacement:
    kind: MarkerKind
    fraction: float
    y: float
    lane: int
    color: str

    @property
    def row(self) -> int:
        return int(round(self.y))

    @property
    def glyph(self) -> str:
        return GLYPHS[self.kind]


def marker_color(marker: Marker) -> str:
    if marker.kind is MarkerKind.HIGHLIGHT and marker.color is not None:
        return marker.color.scrubber_color
    return DEFAULT_COLORS[marker.kind]


def place_markers(
    markers: Iterable[Marker],
    track_top: float,
    track_height: float,
) -> list[MarkerPlacement]:
    """Map markers to track coordinates, one glyph per lane and row."""
    placements: list[MarkerPlacement] = []
    occupied: set[tuple[int, int]] = set()

    for marker in markers:
        try:
            index = global_chapter_index(marker.book, marker.chapter)
        except UnknownBookError:
            log.warning("Skipping %s marker for unknown book %r", marker.kind.value, marker.book)
            continue

        fraction = fraction_for_index(index)
        placement = MarkerPlacement(
            kind=marker.kind,
            fraction=fraction,
            y=track_top + fraction * track_height,
            lane=LANE_OFFSETS[marker.kind],
            color=marker_color(marker),
        )
        key = (placement.lane, placement.row)
        if key in occupied:
            continue
        occupied.add(key)
        placements.append(placement)

    return placements
