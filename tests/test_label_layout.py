from __future__ import annotations

import pytest

from bible_scrubber.core.canon import BOOK_NAMES
from bible_scrubber.core.label_layout import (
    compose_panel,
    focus_shift,
    focused_label_index,
    is_emphasized,
    label_scale,
    layout_labels,
    min_gap_fraction,
    spread_fractions,
)
from bible_scrubber.core.mapper import book_ranges, fraction_for_position
from bible_scrubber.models.position import ChapterPosition

EPSILON = 1e-9


def mids() -> list[float]:
    return [r.mid_fraction for r in book_ranges()]


def assert_spaced(fractions: list[float], gap: float) -> None:
    for a, b in zip(fractions, fractions[1:]):
        assert b - a >= gap - EPSILON


def test_min_gap_fraction() -> None:
    assert min_gap_fraction(10, 200) == 0.05
    assert min_gap_fraction(10, 0) == 0.0
    assert min_gap_fraction(10, -5) == 0.0


def test_trivial_inputs_are_unchanged() -> None:
    assert spread_fractions([], 0.1) == []
    assert spread_fractions([0.3], 0.1) == [0.3]


def test_zero_gap_leaves_fractions_alone() -> None:
    assert spread_fractions(mids(), 0.0) == mids()


def test_roomy_track_keeps_minimum_gap_and_order() -> None:
    gap = min_gap_fraction(1, 1000)
    spaced = spread_fractions(mids(), gap)
    assert_spaced(spaced, gap)
    assert spaced == sorted(spaced)
    assert min(spaced) >= -EPSILON
    assert max(spaced) <= 1 + EPSILON


def test_crowded_track_spaces_exactly_and_overflows() -> None:
    gap = min_gap_fraction(1, 40)
    assert (len(BOOK_NAMES) - 1) * gap > 1
    spaced = spread_fractions(mids(), gap)
    for a, b in zip(spaced, spaced[1:]):
        assert b - a == pytest.approx(gap)
    assert spaced[-1] == pytest.approx(1.0)
    assert spaced[0] == pytest.approx(1.0 - 65 * gap)
    assert spaced[0] < 0


def test_identical_fractions_spread_from_the_first() -> None:
    spaced = spread_fractions([0.2] * 5, 0.1)
    assert spaced == pytest.approx([0.2, 0.3, 0.4, 0.5, 0.6])


def test_trailing_labels_pulled_back_inside_track() -> None:
    spaced = spread_fractions([0.1, 0.95, 0.97, 0.99], 0.05)
    assert spaced == pytest.approx([0.1, 0.9, 0.95, 1.0])
    assert_spaced(spaced, 0.05)


def test_layout_overshoot() -> None:
    layout = layout_labels(mids(), 1, 40)
    assert layout.overshoot_top == pytest.approx((65 / 40 - 1) * 40)
    assert layout.overshoot_bottom == pytest.approx(0.0)

    roomy = layout_labels(mids(), 1, 1000)
    assert roomy.overshoot_top == 0
    assert roomy.overshoot_bottom == 0


def test_empty_layout_has_no_overshoot() -> None:
    layout = layout_labels([], 1, 40)
    assert layout.overshoot_top == 0
    assert layout.overshoot_bottom == 0
    assert focus_shift(layout, 0, 0.5) == 0


def test_focus_shift_aligns_focused_label_with_thumb() -> None:
    layout = layout_labels(mids(), 1, 40)
    thumb = 0.5
    focus = focused_label_index(book_ranges(), thumb, None)
    assert BOOK_NAMES[focus] == "Psalms"
    shift = focus_shift(layout, focus, thumb)
    assert layout.label_y(focus) + shift == pytest.approx(thumb * 40)


def test_hovered_label_takes_focus() -> None:
    assert focused_label_index(book_ranges(), 0.0, 42) == 42
    assert focused_label_index(book_ranges(), 0.0, None) == 0
    assert focused_label_index(book_ranges(), 1.0, None) == 65


def test_emphasis_and_scale() -> None:
    ranges = book_ranges()
    psalms = BOOK_NAMES.index("Psalms")
    thumb = ranges[psalms].mid_fraction

    assert is_emphasized(psalms, ranges, thumb, None)
    assert not is_emphasized(0, ranges, thumb, None)
    assert is_emphasized(0, ranges, thumb, 0)

    assert label_scale(psalms, ranges, thumb, None) == 1.6
    assert label_scale(0, ranges, thumb, 0) == 2.0
    assert label_scale(65, ranges, thumb, None) == 1.0


def test_compose_panel_puts_focused_label_on_thumb_row() -> None:
    thumb = fraction_for_position(ChapterPosition(book_name="John", chapter_number=1))
    frame = compose_panel(
        book_ranges(),
        thumb_fraction=thumb,
        hovered_index=None,
        track_height=40,
        track_inset=1,
        min_gap_px=1,
        anchor=(10, 5),
        width=18,
    )
    john = frame.labels[BOOK_NAMES.index("John")]
    assert john.name == "John"
    assert john.emphasized
    assert john.y - frame.top_buffer == pytest.approx(1 + thumb * 40)
    assert min(label.y for label in frame.labels) >= -EPSILON
    assert frame.anchor_y == pytest.approx(5 - frame.top_buffer)
    assert frame.height >= max(label.y for label in frame.labels)
    assert frame.label_at(john.y + 0.5) == john.index


def test_compose_panel_with_zero_height_track() -> None:
    frame = compose_panel(
        book_ranges(),
        thumb_fraction=0.0,
        hovered_index=None,
        track_height=0,
        track_inset=0,
        min_gap_px=1,
    )
    assert len(frame.labels) == 66
    assert frame.shift == 0
    assert all(label.y == 0 for label in frame.labels)


def test_compose_panel_without_labels() -> None:
    frame = compose_panel([], 0.5, None, 40, 1, 1)
    assert frame.labels == ()
    assert frame.top_buffer == 0
    assert frame.bottom_buffer == 0
