"""``ghwatch watch`` — show the live workflow dashboard.

Polls every configured repository, keeps the most recent run per
branch and redraws the table every tick.  Any config, fetch or
timestamp error ends the session with exit code 1.
"""

from __future__ import annotations

import logging
from functools import partial
from pathlib import Path

import requests
import typer
from rich.console import Console
from rich.markup import escape

from ghwatch.config import settings
from ghwatch.core.aggregator import poll_watch_state
from ghwatch.core.config_loader import ConfigLoadError, load_watch_config
from ghwatch.core.fetcher import FetchError
from ghwatch.monitor.projection import TimestampParseError
from ghwatch.monitor.renderer import WatchRenderer

logger = logging.getLogger(__name__)

console = Console()


def _fail(exc: Exception) -> None:
    logger.debug("Fatal: %s", exc)
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=1)


def watch_cmd(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the YAML config (default: GHWATCH_CONFIG_PATH or config.yml).",
    ),
    interval: float = typer.Option(
        None,
        "--interval",
        "-i",
        min=0.1,
        help="Seconds between polls (default: GHWATCH_REFRESH_INTERVAL or 7.5).",
    ),
    once: bool = typer.Option(
        False,
        "--once",
        help="Poll once, print the table and exit.",
    ),
) -> None:
    """Show the most recent workflow run per repository and branch.

    Press q or Ctrl+C to quit.
    """
    path = config_path or settings.config_path
    try:
        watch_config = load_watch_config(path)
    except ConfigLoadError as exc:
        _fail(exc)

    if not watch_config.repos:
        console.print(f"[yellow]No repositories configured in {escape(str(path))}.[/yellow]")

    renderer = WatchRenderer(console=console)
    session = requests.Session()
    poll = partial(poll_watch_state, watch_config, session=session)

    try:
        if once:
            renderer.print_snapshot(renderer.projection.snapshot(poll()))
        else:
            renderer.render_live(
                poll,
                interval=interval if interval is not None else settings.refresh_interval,
            )
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except (FetchError, TimestampParseError) as exc:
        _fail(exc)
    finally:
        session.close()
