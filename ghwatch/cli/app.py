"""Main Typer application — registers all CLI commands.

Entry point: ``ghwatch`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from ghwatch.cli.commands.repos_cmd import repos_cmd
from ghwatch.cli.commands.watch_cmd import watch_cmd
from ghwatch.config import settings

app = typer.Typer(
    name="ghwatch",
    help="ghwatch: live GitHub Actions status for your repositories.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="watch", help="Show the live workflow dashboard.")(watch_cmd)
app.command(name="repos", help="List the configured repositories.")(repos_cmd)


def configure_logging(level: str) -> None:
    """Send log records to stderr through Rich."""
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None,
        "--log-level",
        help="Logging level (default: GHWATCH_LOG_LEVEL or WARNING).",
    ),
) -> None:
    """ghwatch: live GitHub Actions status for your repositories."""
    configure_logging(log_level or settings.log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
