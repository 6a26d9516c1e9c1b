# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console
from rich.table import Table

from temps import configuration
from temps.repository.configuration import CONFIGURATION_REPO
from temps.terminal.custom_typer import AliasedTyperGroup
from temps.terminal.parse import parse_duration
from temps.time import duration_to_str

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))
    table.add_row(
        "temps_file",
        str(configuration.resolve_temps_file(config["temps_file"])),
    )
    table.add_row("midnight_offset", config["midnight_offset"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )

    console.print(table)


@app.command("set, s")
def set(
    temps_file: Annotated[
        Optional[str],
        typer.Option("--temps-file", help="Path for the tracking data"),
    ] = None,
    remove_temps_file: Annotated[
        bool,
        typer.Option("--remove-temps-file", help="Go back to the default path"),
    ] = False,
    midnight_offset: Annotated[
        Optional[pendulum.Duration],
        typer.Option(
            "--midnight-offset",
            parser=parse_duration,
            help="Time at which the current day is considered to have ended (HH:MM)",
        ),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--hide-header", help="Show report headers"),
    ] = None,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        temps_file=temps_file,
        remove_temps_file=remove_temps_file,
        midnight_offset=(
            duration_to_str(midnight_offset) if midnight_offset is not None else None
        ),
        show_header=show_header,
    )
    CONFIGURATION_REPO.flush()

    console = Console()
    console.print("[green]Configuration updated[/green]")
