"""
themevars CLI.

Commands for inspecting and exporting the theme variables of an
annotated SCSS theme file.
"""

from __future__ import annotations

import logging
import os

import typer

from themevars._version import get_version

from .variables import export_command, list_command, presets_command, show_command

app = typer.Typer(
    help="Inspect theme variables of an annotated SCSS theme file.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"themevars {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version",
    ),
    log_level: str = typer.Option(
        os.getenv("LOG_LEVEL", "WARNING"),
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    ),
) -> None:
    """themevars CLI main callback for global options."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


app.command(name="list")(list_command)
app.command(name="presets")(presets_command)
app.command(name="show")(show_command)
app.command(name="export")(export_command)


def main() -> None:
    app(standalone_mode=True)


__all__ = ["app", "main", "version_callback"]
