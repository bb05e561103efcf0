"""Book label decluttering for the scrubber label panel.

Labels start at the midpoint of each book's range on the track. When the
track is too short for every label, a two-pass relaxation spaces them at
least ``min_gap`` apart while keeping them in canonical order and as close
as possible to their true positions. Results may extend past either end of
the track; the panel host reserves buffer space for that overshoot and
shifts the whole stack so the focused label sits level with the thumb.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bible_scrubber.models.position import BookRange


def min_gap_fraction(min_gap_px: float, track_height_px: float) -> float:
    """Express a pixel (or row) gap as a fraction of the track height."""
    if track_height_px <= 0:
        return 0.0
    return min_gap_px / track_height_px


def spread_fractions(fractions: Sequence[float], min_gap: float) -> list[float]:
    """Space non-decreasing fractions at least ``min_gap`` apart, preserving order."""
    spaced = list(fractions)
    if len(spaced) < 2:
        return spaced

    # Forward pass: enforce the gap looking backward.
    for i in range(1, len(spaced)):
        floor = spaced[i - 1] + min_gap
        if spaced[i] < floor:
            spaced[i] = floor

    if spaced[-1] > 1:
        spaced[-1] = 1.0

    # Backward pass: enforce the gap looking forward.
    for i in range(len(spaced) - 2, -1, -1):
        ceiling = spaced[i + 1] - min_gap
        if spaced[i] > ceiling:
            spaced[i] = ceiling

    return spaced


@dataclass(frozen=True)
class LabelLayout:
    """Spaced label fractions for a track of a given height."""

    fractions: tuple[float, ...]
    min_gap: float
    track_height: float

    @property
    def overshoot_top(self) -> float:
        if not self.fractions:
            return 0.0
        return max(0.0, -min(self.fractions)) * self.track_height

    @property
    def overshoot_bottom(self) -> float:
        if not self.fractions:
            return 0.0
        return max(0.0, max(self.fractions) - 1) * self.track_height

    def label_y(self, index: int) -> float:
        return self.fractions[index] * self.track_height


def layout_labels(
    mid_fractions: Sequence[float],
    min_gap_px: float,
    track_height: float,
) -> LabelLayout:
    gap = min_gap_fraction(min_gap_px, track_height)
    return LabelLayout(
        fractions=tuple(spread_fractions(mid_fractions, gap)),
        min_gap=gap,
        track_height=max(0.0, track_height),
    )


def focus_shift(layout: LabelLayout, focus_index: int | None, thumb_fraction: float) -> float:
    """Offset that moves the focused label level with the thumb."""
    if focus_index is None or not 0 <= focus_index < len(layout.fractions):
        return 0.0
    return thumb_fraction * layout.track_height - layout.label_y(focus_index)


def containing_range_index(ranges: Sequence[BookRange], fraction: float) -> int | None:
    for i, book_range in enumerate(ranges):
        if book_range.contains(fraction):
            return i
    if ranges and fraction >= ranges[-1].end_fraction:
        return len(ranges) - 1
    return None


def focused_label_index(
    ranges: Sequence[BookRange],
    thumb_fraction: float,
    hovered_index: int | None,
) -> int | None:
    if hovered_index is not None and 0 <= hovered_index < len(ranges):
        return hovered_index
    return containing_range_index(ranges, thumb_fraction)


def is_emphasized(
    index: int,
    ranges: Sequence[BookRange],
    thumb_fraction: float,
    hovered_index: int | None,
) -> bool:
    """A label stands out when it is hovered or its book holds the thumb."""
    if index == hovered_index:
        return True
    return containing_range_index(ranges, thumb_fraction) == index


def label_scale(
    index: int,
    ranges: Sequence[BookRange],
    thumb_fraction: float,
    hovered_index: int | None,
) -> float:
    """Relative label size, growing as the thumb nears the book's midpoint."""
    if hovered_index == index:
        return 2.0
    distance = abs(ranges[index].mid_fraction - thumb_fraction)
    if distance < 0.02:
        return 1.6
    if distance < 0.05:
        return 1.3
    if distance < 0.1:
        return 1.1
    return 1.0


@dataclass(frozen=True)
class LabelPlacement:
    index: int
    name: str
    y: float
    scale: float
    emphasized: bool


@dataclass(frozen=True)
class PanelFrame:
    """Logical geometry of the label panel, handed to the host overlay.

    ``y`` values of the placements are relative to the panel's top edge,
    which sits ``top_buffer`` above the anchor.
    """

    anchor_x: float
    anchor_y: float
    width: float
    height: float
    top_buffer: float
    bottom_buffer: float
    shift: float
    labels: tuple[LabelPlacement, ...]

    def label_at(self, y: float, row_height: float = 1.0) -> int | None:
        """Index of the label whose row spans ``y``, if any."""
        for label in self.labels:
            if label.y <= y < label.y + row_height:
                return label.index
        return None


def compose_panel(
    ranges: Sequence[BookRange],
    thumb_fraction: float,
    hovered_index: int | None,
    track_height: float,
    track_inset: float,
    min_gap_px: float,
    anchor: tuple[float, float] = (0.0, 0.0),
    width: float = 0.0,
) -> PanelFrame:
    """Lay out every book label and size the panel around them."""
    layout = layout_labels([r.mid_fraction for r in ranges], min_gap_px, track_height)
    shift = focus_shift(
        layout, focused_label_index(ranges, thumb_fraction, hovered_index), thumb_fraction
    )

    track_ys = [track_inset + layout.label_y(i) + shift for i in range(len(ranges))]
    track_bottom = track_inset * 2 + layout.track_height
    top_buffer = max(0.0, -min(track_ys)) if track_ys else 0.0
    bottom_buffer = max(0.0, max(track_ys) + min_gap_px - track_bottom) if track_ys else 0.0

    labels = tuple(
        LabelPlacement(
            index=i,
            name=book_range.name,
            y=top_buffer + track_ys[i],
            scale=label_scale(i, ranges, thumb_fraction, hovered_index),
            emphasized=is_emphasized(i, ranges, thumb_fraction, hovered_index),
        )
        for i, book_range in enumerate(ranges)
    )

    return PanelFrame(
        anchor_x=anchor[0],
        anchor_y=anchor[1] - top_buffer,
        width=width,
        height=top_buffer + track_bottom + bottom_buffer,
        top_buffer=top_buffer,
        bottom_buffer=bottom_buffer,
        shift=shift,
        labels=labels,
    )
