"""Shared CLI helpers."""

from __future__ import annotations

from pathlib import Path

import typer

from themevars.core.errors import ConfigError
from themevars.core.manager import ThemeVariablesManager
from themevars.core.settings import SETTINGS_FILE, load_settings


def load_manager(config: Path | None, file: Path | None) -> ThemeVariablesManager:
    """Load the theme variables named by ``--file`` or the settings file.

    ``--file`` wins over the configured path. Exits with code 1 on a
    broken settings file or when the variables file does not exist.
    """
    try:
        settings = load_settings(config or Path(SETTINGS_FILE))
    except ConfigError as e:
        typer.echo(f"Error loading settings: {e}", err=True)
        raise typer.Exit(code=1)

    if file is not None:
        settings.theme_variables_file_path = str(file)

    path = settings.theme_variables_file_path
    if path is not None and not Path(path).exists():
        typer.echo(f"Theme variables file not found: {path}", err=True)
        raise typer.Exit(code=1)

    return ThemeVariablesManager(settings)
