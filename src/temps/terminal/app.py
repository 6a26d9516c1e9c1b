# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from temps import state as app_state
from temps.configuration import resolve_temps_file
from temps.model.interval import InvalidIntervalError
from temps.repository.configuration import CONFIGURATION_REPO
from temps.repository.interval import INTERVAL_REPO
from temps.terminal import configuration, interval, report
from temps.terminal.custom_typer import OrderedAliasedTyperGroup
from temps.terminal.parse import parse_duration
from temps.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="temps - Simple time tracker",
)
app.command(name="summary, su")(report.summary)
app.command(name="start, sa")(interval.start)
app.command(name="stop, so")(interval.stop)
app.command(name="cancel, ca")(interval.cancel)
app.command(name="list, ls")(interval.list_intervals)
app.command(name="edit, e")(interval.edit)
app.command(name="viz, v")(report.viz)
app.add_typer(configuration.app, name="config, c", help="View and change settings")


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    temps_file: Annotated[
        Optional[str],
        typer.Option(
            "--temps-file",
            envvar="TEMPS_FILE",
            help="Path for the tracking data [default: ~/temps.tsv]",
        ),
    ] = None,
    midnight_offset: Annotated[
        Optional[pendulum.Duration],
        typer.Option(
            "--midnight-offset",
            envvar="TEMPS_MIDNIGHT_OFFSET",
            parser=parse_duration,
            help="Time at which we consider the current day to have ended (HH:MM)",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    temps - Simple time tracker

    Global options that apply to all commands. Without a command, shows
    today's summary.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = CONFIGURATION_REPO.get_config()

    # Command line and environment win over the config file
    INTERVAL_REPO.use_path(
        resolve_temps_file(temps_file if temps_file is not None else config["temps_file"])
    )
    if midnight_offset is None:
        midnight_offset = parse_duration(config["midnight_offset"])
    app_state.set_midnight_offset(
        midnight_offset if midnight_offset is not None else pendulum.duration()
    )
    view_state.set_show_header(config["show_header"] and not no_header)

    if ctx.invoked_subcommand is None:
        report.summary()


def run() -> None:
    try:
        app()
    except InvalidIntervalError as e:
        Console(stderr=True).print(
            f"[red]Error: invalid tracking file {INTERVAL_REPO.path}: {e}[/red]"
        )
        raise SystemExit(1)
