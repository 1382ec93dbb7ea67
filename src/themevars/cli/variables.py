"""
Theme variable inspection commands.

- list: Table (or JSON) of theme variables
- presets: Discovered color presets
- show: All presets of a single variable
- export: Write a DTCG tokens.json
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from themevars.core.dtcg_export import export_dtcg_file
from themevars.core.ir import ColorModifier, ThemeVariableDetails

from .common import load_manager

console = Console()

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Settings file (default: ./themevars.toml)"),
]
FileOption = Annotated[
    Path | None,
    typer.Option("--file", "-f", help="Theme variables file, overrides the settings"),
]


def _describe(details: ThemeVariableDetails | None) -> str:
    if details is None:
        return "[dim]-[/dim]"
    text = details.value
    if details.parent_variable:
        text += f" [dim]← {details.parent_variable}[/dim]"
    if details.color_modifier is not ColorModifier.NONE:
        text += f" [cyan]{details.color_modifier.value} {details.color_modifier_value}%[/cyan]"
    return text


def list_command(
    config: ConfigOption = None,
    file: FileOption = None,
    preset: Annotated[str | None, typer.Option("--preset", "-p", help="Only this preset")] = None,
    module: Annotated[str | None, typer.Option("--module", "-m", help="Only this module")] = None,
    output_json: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """List theme variables."""
    manager = load_manager(config, file)

    presets = manager.get_color_presets()
    if preset is not None:
        if preset not in presets:
            typer.echo(f"Unknown preset: {preset}", err=True)
            raise typer.Exit(code=1)
        presets = [preset]

    variables = [
        v for v in manager.get_theme_variables() if module is None or v.module == module
    ]

    if output_json:
        data = [
            {
                "name": v.name,
                "module": v.module,
                "rgb_used": v.rgb_used,
                "details": {
                    p: v.details[p].model_dump(mode="json") for p in presets if p in v.details
                },
            }
            for v in variables
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    table = Table(title="Theme Variables")
    table.add_column("Name", style="bold")
    table.add_column("Module", style="dim")
    for name in presets:
        table.add_column(name)
    table.add_column("RGB")

    for variable in variables:
        table.add_row(
            variable.name,
            variable.module,
            *(_describe(variable.get_details(p)) for p in presets),
            "yes" if variable.rgb_used else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(variables)} variable(s) shown[/dim]")


def presets_command(
    config: ConfigOption = None,
    file: FileOption = None,
) -> None:
    """List color presets in discovery order."""
    manager = load_manager(config, file)
    for preset in manager.get_color_presets():
        typer.echo(preset)


def show_command(
    name: Annotated[str, typer.Argument(help="Variable name, e.g. primary-color")],
    config: ConfigOption = None,
    file: FileOption = None,
) -> None:
    """Show every preset of one theme variable."""
    manager = load_manager(config, file)
    if not name.startswith("--"):
        name = f"--{name}"
    variable = manager.get_theme_variable(name)
    if variable is None:
        typer.echo(f"Theme variable not found: {name}", err=True)
        raise typer.Exit(code=1)

    console.print(f"[bold]{variable.name}[/bold] [dim]({variable.module})[/dim]")
    if variable.rgb_used:
        console.print("  RGB companion: yes")
    for preset, details in variable.details.items():
        console.print(f"  {preset}: {_describe(details)}")
        if details.placeholder != details.value:
            console.print(f"    [dim]declared as {details.placeholder}[/dim]")


def export_command(
    output: Annotated[
        Path, typer.Option("--output", "-o", help="Output file path")
    ] = Path("tokens.json"),
    config: ConfigOption = None,
    file: FileOption = None,
) -> None:
    """Export theme variables as DTCG design tokens."""
    manager = load_manager(config, file)
    path = export_dtcg_file(manager, output)
    typer.echo(f"Exported {len(manager.get_theme_variables())} variables to {path}")
