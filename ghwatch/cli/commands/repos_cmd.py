"""``ghwatch repos`` — list the repositories the dashboard will poll."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ghwatch.config import settings
from ghwatch.core.config_loader import ConfigLoadError, load_watch_config

console = Console()


def repos_cmd(
    config_path: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to the YAML config (default: GHWATCH_CONFIG_PATH or config.yml).",
    ),
) -> None:
    """List configured repositories in poll order.  The token is never shown."""
    path = config_path or settings.config_path
    try:
        watch_config = load_watch_config(path)
    except ConfigLoadError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    if not watch_config.repos:
        console.print("[dim]No repositories configured.[/dim]")
        return

    table = Table(title=f"Repositories ({escape(str(path))})")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Owner", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Runs endpoint")

    for i, repo in enumerate(watch_config.repos, start=1):
        table.add_row(
            str(i),
            repo.owner,
            repo.name,
            settings.runs_url(repo.owner, repo.name),
        )

    console.print(table)
    token_state = "[green]set[/green]" if watch_config.pat else "[yellow]missing[/yellow]"
    console.print(f"[bold]Token:[/bold] {token_state}")
