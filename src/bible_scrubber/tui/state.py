"""State management for the scrubber TUI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

from bible_scrubber.core.label_layout import PanelFrame
from bible_scrubber.core.mapper import (
    chapter_position,
    clamp_fraction,
    fraction_for_position,
    index_for_fraction,
)
from bible_scrubber.models.position import ChapterPosition

log = logging.getLogger(__name__)


def default_data_dir() -> Path:
    override = os.environ.get("BIBLE_SCRUBBER_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".bible_scrubber"


@dataclass
class ReaderConfig:
    """Configuration for the reader TUI."""

    data_dir: Path = field(default_factory=default_data_dir)
    track_inset: int = 1  # rows kept free above and below the track
    min_label_gap: int = 1  # rows between adjacent book labels
    panel_width: int = 18
    max_history: int = 100
    max_back: int = 20
    markers_file: Path | None = None


@dataclass(frozen=True)
class TrackGeometry:
    """Post-layout geometry reported by the host for the scrubber track."""

    top: float
    height: float
    anchor_x: float = 0.0
    anchor_y: float = 0.0

    def fraction_at(self, y: float) -> float:
        if self.height <= 0:
            return 0.0
        return clamp_fraction((y - self.top) / self.height)

    def y_for(self, fraction: float) -> float:
        return self.top + fraction * self.height


class LabelPanelHost(Protocol):
    """Overlay primitive that shows the book label panel at an anchor."""

    def present(self, frame: PanelFrame) -> None: ...

    def dismiss(self) -> None: ...


class ScrubberPhase(str, Enum):
    IDLE = "idle"
    HOVERED = "hovered"
    DRAGGING = "dragging"


@dataclass(frozen=True)
class ScrubberSnapshot:
    """What the label overlay needs to redraw itself."""

    labels_visible: bool
    fraction: float
    hovered_book_index: int | None
    phase: ScrubberPhase


NavigateCallback = Callable[[ChapterPosition], None]
DragEndCallback = Callable[[], None]
SnapshotCallback = Callable[[ScrubberSnapshot], None]


class ScrubberController:
    """Pointer interaction on the scrubber track.

    The controller owns hover, drag and focus state and only changes it
    through the transition methods below. Navigation requests go to
    ``on_navigate`` and ``on_drag_end`` hears when a drag finishes.
    Subscribers hear about every change that affects the label overlay.
    """

    def __init__(
        self,
        on_navigate: NavigateCallback,
        position: ChapterPosition | None = None,
        on_drag_end: DragEndCallback | None = None,
    ) -> None:
        self._on_navigate = on_navigate
        self._on_drag_end = on_drag_end
        self._position = position or chapter_position(0)
        self._position_fraction = fraction_for_position(self._position)
        self._hover_regions: set[str] = set()
        self._dragging = False
        self._drag_fraction = 0.0
        self._hovered_book_index: int | None = None
        self._last_navigated_index: int | None = None
        self._subscribers: list[SnapshotCallback] = []

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def position(self) -> ChapterPosition:
        return self._position

    @property
    def is_hovered(self) -> bool:
        return bool(self._hover_regions)

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def phase(self) -> ScrubberPhase:
        if self._dragging:
            return ScrubberPhase.DRAGGING
        if self._hover_regions:
            return ScrubberPhase.HOVERED
        return ScrubberPhase.IDLE

    @property
    def labels_visible(self) -> bool:
        return self.is_hovered or self._dragging

    @property
    def current_fraction(self) -> float:
        if self._dragging:
            return self._drag_fraction
        return self._position_fraction

    @property
    def hovered_book_index(self) -> int | None:
        return self._hovered_book_index

    @property
    def last_navigated_index(self) -> int | None:
        return self._last_navigated_index

    def snapshot(self) -> ScrubberSnapshot:
        return ScrubberSnapshot(
            labels_visible=self.labels_visible,
            fraction=self.current_fraction,
            hovered_book_index=self._hovered_book_index,
            phase=self.phase,
        )

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, callback: SnapshotCallback) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish_if_changed(self, before: ScrubberSnapshot) -> None:
        """Notify once if visibility changed, or fraction/hover changed while visible."""
        after = self.snapshot()
        changed = after.labels_visible != before.labels_visible or (
            after.labels_visible
            and (
                after.fraction != before.fraction
                or after.hovered_book_index != before.hovered_book_index
            )
        )
        if not changed:
            return
        for callback in list(self._subscribers):
            callback(after)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def set_position(self, position: ChapterPosition) -> None:
        """Report the chapter currently visible in the reading pane."""
        before = self.snapshot()
        self._position = position
        self._position_fraction = fraction_for_position(position)
        self._publish_if_changed(before)

    def pointer_enter(self, region: str = "track") -> None:
        before = self.snapshot()
        self._hover_regions.add(region)
        self._publish_if_changed(before)

    def pointer_leave(self, region: str = "track") -> None:
        before = self.snapshot()
        self._hover_regions.discard(region)
        if region == "panel" or not self._hover_regions:
            self._hovered_book_index = None
        self._publish_if_changed(before)

    def drag_begin(self, y: float, geometry: TrackGeometry) -> None:
        before = self.snapshot()
        self._dragging = True
        self._last_navigated_index = None
        self._drag_to(geometry.fraction_at(y))
        self._publish_if_changed(before)

    def drag_move(self, y: float, geometry: TrackGeometry) -> None:
        if not self._dragging:
            return
        before = self.snapshot()
        self._drag_to(geometry.fraction_at(y))
        self._publish_if_changed(before)

    def drag_end(self) -> None:
        if not self._dragging:
            return
        before = self.snapshot()
        self._dragging = False
        self._last_navigated_index = None
        self._publish_if_changed(before)
        if self._on_drag_end is not None:
            self._on_drag_end()

    def hover_book(self, index: int | None) -> None:
        before = self.snapshot()
        self._hovered_book_index = index
        self._publish_if_changed(before)

    def tap_book(self, book_name: str) -> None:
        position = ChapterPosition(book_name=book_name, chapter_number=1)
        log.debug("Label tap navigates to %s", position)
        self._on_navigate(position)

    def _drag_to(self, fraction: float) -> None:
        self._drag_fraction = fraction
        index = index_for_fraction(fraction)
        if index == self._last_navigated_index:
            return
        self._last_navigated_index = index
        position = chapter_position(index)
        log.debug("Drag navigates to %s (index %d)", position, index)
        self._on_navigate(position)


class RelayoutScheduler:
    """Defers a recomputation until after the host's next layout pass.

    At most one recomputation is pending; a newer request supersedes it.
    """

    def __init__(self, defer: Callable[[Callable[[], None]], object]) -> None:
        self._defer = defer
        self._generation = 0
        self._pending = False

    @property
    def pending(self) -> bool:
        return self._pending

    def request(self, job: Callable[[], None]) -> None:
        self._generation += 1
        generation = self._generation
        self._pending = True

        def run() -> None:
            if generation != self._generation:
                return
            self._pending = False
            job()

        self._defer(run)

    def cancel(self) -> None:
        self._generation += 1
        self._pending = False
