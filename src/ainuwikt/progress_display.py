"""
Rich live panel showing batch rendering progress.

    with RenderProgress("Rendering entries") as progress:
        for entry in entries:
            ...
            progress.rendered(entry.lemma)
"""

import time
from typing import Optional

from rich import box
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def format_elapsed(seconds: float) -> str:
    """Format seconds as MM:SS, or HH:MM:SS past one hour."""
    seconds = int(seconds)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


class RenderProgress:
    """Context manager counting rendered and skipped entries."""

    def __init__(
        self,
        title: str = "Rendering",
        update_interval: int = 100,
        console: Optional[Console] = None,
    ):
        self.title = title
        self.update_interval = update_interval
        self.console = console
        self.rendered_count = 0
        self.skipped_count = 0
        self.last_lemma = ""
        self.start_time = 0.0
        self.live: Optional[Live] = None

    def __enter__(self):
        self.start_time = time.time()
        self.live = Live(self._make_panel(), console=self.console, refresh_per_second=4)
        self.live.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.live:
            self.live.update(self._make_panel())
            self.live.__exit__(exc_type, exc_val, exc_tb)
        return False

    def rendered(self, lemma: str) -> None:
        self.rendered_count += 1
        self.last_lemma = lemma
        self._tick()

    def skipped(self) -> None:
        self.skipped_count += 1
        self._tick()

    def _tick(self) -> None:
        total = self.rendered_count + self.skipped_count
        if self.live and total % self.update_interval == 0:
            self.live.update(self._make_panel())

    def _make_panel(self) -> Panel:
        elapsed = time.time() - self.start_time if self.start_time else 0.0
        rate = self.rendered_count / elapsed if elapsed > 0 else 0.0

        grid = Table.grid(padding=(0, 2))
        grid.add_column(justify="left", no_wrap=True)
        grid.add_column(justify="right", no_wrap=True)

        rows = [
            ("Rendered", f"{self.rendered_count:,}"),
            ("Skipped", f"{self.skipped_count:,}"),
            ("Last", self.last_lemma or "-"),
            ("Elapsed", format_elapsed(elapsed)),
            ("Rate", f"{rate:,.1f}/s"),
        ]
        for label, value in rows:
            grid.add_row(Text(f"{label}:", style="bold grey50"), Text(value, style="bright_cyan"))

        return Panel(grid, title=self.title, box=box.SIMPLE, border_style="bright_black")
