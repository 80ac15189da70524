"""ghwatch CLI — Typer-based command-line interface.

Provides the ``ghwatch`` command with subcommands for the live
dashboard and for inspecting the configured repositories.

All output uses Rich for formatted terminal display.
"""
