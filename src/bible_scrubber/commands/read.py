"""Read command implementation: launches the reader TUI."""

import logging

from pydantic import ValidationError
from rich.console import Console

from bible_scrubber.models.markers import Marker
from bible_scrubber.models.position import ChapterPosition
from bible_scrubber.store.manager import ReaderStore, load_markers
from bible_scrubber.tui.state import ReaderConfig

log = logging.getLogger(__name__)


def execute_read(
    position: ChapterPosition | None,
    config: ReaderConfig,
    console: Console,
) -> None:
    """Open the reader at ``position``, or where the last session left off."""
    from bible_scrubber.tui.app import ReaderApp

    markers: list[Marker] = []
    if config.markers_file is not None:
        try:
            markers = load_markers(config.markers_file)
        except (OSError, ValidationError) as e:
            raise ValueError(f"Could not load markers from {config.markers_file}: {e}") from e
        log.info("Loaded %d marker(s) from %s", len(markers), config.markers_file)

    store = ReaderStore(
        config.data_dir,
        max_history=config.max_history,
        max_back=config.max_back,
    )

    app = ReaderApp(position=position, config=config, store=store, markers=markers)
    app.run()

    console.print(f"[dim]Stopped at[/] [bold]{app.position}[/]")
