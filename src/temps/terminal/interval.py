# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from temps.model.interval import InvalidIntervalError
from temps.repository.interval import INTERVAL_REPO
from temps.service.interval import close_interval, create_interval, is_ongoing
from temps.terminal.completion import complete_project
from temps.terminal.parse import open_editor_for_file, parse_datetime
from temps.time import datetime_to_iso_str, now_local
from temps.view.view.views import interval as interval_report

logger = logging.getLogger(__name__)

# Status messages go to stderr so reports can be piped
err_console = Console(stderr=True)


def start(
    project: Annotated[
        Optional[str],
        typer.Argument(
            help="Project name (defaults to last project)",
            autocompletion=complete_project,
        ),
    ] = None,
    from_: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--from",
            "-f",
            parser=parse_datetime,
            help="Start date (defaults to now). valid inputs: YYYY-MM-DD HH:mm, RFC 3339, (H)H:mm[:ss], now",
        ),
    ] = None,
) -> None:
    """
    start a new timer, stopping the ongoing one
    """
    now = now_local()
    last = INTERVAL_REPO.get_last_interval()

    # Use previous project as default
    if project is None:
        if last is None:
            err_console.print(
                "[red]Error: Cannot infer project name, please specify[/red]"
            )
            raise typer.Exit(1)
        project = last["project"]

    stopped = None
    try:
        interval = create_interval(
            project, from_ if from_ is not None else now, now, after=last
        )
        # Stop previous entry at the new start if it's still ongoing
        if last is not None and is_ongoing(last):
            stopped = close_interval(last, interval["start"], now)
    except InvalidIntervalError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if stopped is not None:
        INTERVAL_REPO.update_last_interval(stopped)
        logger.info("Stopped %s at %s", stopped["project"], stopped["end"])
        err_console.print(f"Stopped '{stopped['project']}'.", markup=False)

    INTERVAL_REPO.save_new_interval(interval)
    logger.info("Started %s at %s", interval["project"], interval["start"])
    err_console.print(f"Started '{interval['project']}'.", markup=False)


def stop(
    at: Annotated[
        Optional[pendulum.DateTime],
        typer.Option(
            "--at",
            "-a",
            parser=parse_datetime,
            help="Stop date (defaults to now). valid inputs: YYYY-MM-DD HH:mm, RFC 3339, (H)H:mm[:ss], now",
        ),
    ] = None,
) -> None:
    """
    stop the ongoing timer
    """
    now = now_local()
    last = INTERVAL_REPO.get_last_interval()

    if last is None:
        err_console.print("[red]Error: No previous entry exists[/red]")
        raise typer.Exit(1)
    if not is_ongoing(last):
        err_console.print("[red]Error: No ongoing entry[/red]")
        raise typer.Exit(1)

    try:
        stopped = close_interval(last, at if at is not None else now, now)
    except InvalidIntervalError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    INTERVAL_REPO.update_last_interval(stopped)
    logger.info("Stopped %s at %s", stopped["project"], stopped["end"])
    err_console.print(f"Stopped '{stopped['project']}'.", markup=False)


def cancel() -> None:
    """
    cancel the ongoing timer
    """
    last = INTERVAL_REPO.get_last_interval()

    if last is None:
        err_console.print("[red]Error: No previous entry exists[/red]")
        raise typer.Exit(1)
    if not is_ongoing(last):
        err_console.print("[red]Error: No ongoing entry[/red]")
        raise typer.Exit(1)

    cancelled = INTERVAL_REPO.remove_last_interval()
    logger.info("Cancelled %s", cancelled["project"])
    err_console.print(
        f"Cancelled '{cancelled['project']}' "
        f"(started at {datetime_to_iso_str(cancelled['start'])}).",
        markup=False,
    )


def list_intervals() -> None:
    """
    list raw data
    """
    interval_report.intervals_report(INTERVAL_REPO.get_all_intervals())


def edit() -> None:
    """
    edit raw data with the default editor
    """
    open_editor_for_file(INTERVAL_REPO.path)
