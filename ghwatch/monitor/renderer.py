"""Rich terminal renderer for the workflow dashboard.

Turns ``WatchSnapshot`` into a bordered Rich table, and drives the
continuous ``Rich.Live`` mode: one synchronous poll per tick, keyboard
polling between ticks.

Color scheme
------------
- color(28)  : Success
- color(184) : In Progress
- color(160) : Failed
- color(99)  : table border
- color(61)/color(63) : alternating data rows
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.live import Live
from rich.table import Table
from rich.text import Text

from ghwatch.config import DEFAULT_REFRESH_INTERVAL
from ghwatch.monitor.keys import KeyReader
from ghwatch.monitor.projection import WatchProjection

if TYPE_CHECKING:
    from ghwatch.models.runs import WatchState
    from ghwatch.monitor.projection import WatchSnapshot

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Github Workflow Watcher"

HEADERS = ("Repo", "Branch", "Description", "User", "Triggered At", "Build Status")

HEADER_STYLE = "bold #fdfdfd"
BORDER_STYLE = "color(99)"
# First data row is odd
ROW_STYLES = ["color(63)", "color(61)"]

QUIT_KEYS = frozenset({"q"})

# Upper bound on a single key wait so the loop stays responsive
_KEY_POLL_SECONDS = 0.1


class WatchRenderer:
    """Renders ``WatchSnapshot`` as Rich terminal output.

    Parameters
    ----------
    console:
        Rich Console instance.  A new one is created if not provided.
    projection:
        Builds snapshots from poll results.  A default one is created if
        not provided.
    """

    def __init__(
        self,
        console: Console | None = None,
        projection: WatchProjection | None = None,
    ) -> None:
        self.console = console or Console()
        self.projection = projection or WatchProjection()

    # ------------------------------------------------------------------
    # Single snapshot render
    # ------------------------------------------------------------------

    def render_snapshot(self, snapshot: WatchSnapshot) -> Table:
        """Render a WatchSnapshot as a bordered Rich Table.

        Cells are ``Text`` objects, so run titles containing square
        brackets are shown literally rather than parsed as markup.
        """
        table = Table(
            box=box.SQUARE,
            border_style=BORDER_STYLE,
            header_style=HEADER_STYLE,
            row_styles=ROW_STYLES,
            show_header=True,
            show_lines=False,
            caption=(
                f"Last updated: {snapshot.fetched_at.strftime('%Y-%m-%d %H:%M:%S UTC')}"
                "  |  q to quit"
            ),
            caption_style="dim",
        )
        for header in HEADERS:
            table.add_column(header)

        for row in snapshot.rows:
            table.add_row(
                Text(row.repo),
                Text(row.branch),
                Text(row.description),
                Text(row.user),
                Text(row.triggered_at),
                Text(row.status, style=row.status_style),
            )

        return table

    def render_state(self, state: WatchState) -> Table:
        """Project *state* and render the result."""
        return self.render_snapshot(self.projection.snapshot(state))

    # ------------------------------------------------------------------
    # Continuous live rendering
    # ------------------------------------------------------------------

    def render_live(
        self,
        poll: Callable[[], WatchState],
        *,
        interval: float = DEFAULT_REFRESH_INTERVAL,
        keys: KeyReader | None = None,
    ) -> None:
        """Continuously render the dashboard in Rich Live mode.

        Calls *poll* once up front and then once per tick.  Each tick
        runs to completion before the next wait starts, so a slow API
        delays both the next tick and the response to keys.  Press ``q``
        or Ctrl+C to stop.

        Errors raised by *poll* or by rendering are not caught here;
        they end the session.

        Parameters
        ----------
        poll:
            Fetches a fresh ``WatchState``.
        interval:
            Seconds between the end of one tick and the start of the next.
        keys:
            Key source.  Defaults to a ``KeyReader`` on stdin.
        """
        state = poll()
        self.console.set_window_title(WINDOW_TITLE)

        with keys or KeyReader() as reader, Live(
            self.render_state(state),
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=False,
        ) as live:
            try:
                while True:
                    if self._wait_for_quit(reader, interval):
                        logger.info("Quit requested")
                        return
                    state = poll()
                    logger.debug("Tick: %d runs", len(state.runs))
                    live.update(self.render_state(state), refresh=True)
            except KeyboardInterrupt:
                logger.info("Interrupted")

    @staticmethod
    def _wait_for_quit(reader: KeyReader, interval: float) -> bool:
        """Wait up to *interval* seconds; True if a quit key was pressed."""
        deadline = time.monotonic() + interval
        while True:
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                return False
            key = reader.read_key(min(remaining, _KEY_POLL_SECONDS))
            if key in QUIT_KEYS:
                return True

    # ------------------------------------------------------------------
    # Standalone print
    # ------------------------------------------------------------------

    def print_snapshot(self, snapshot: WatchSnapshot) -> None:
        """Print a single snapshot to the console."""
        self.console.print(self.render_snapshot(snapshot))
