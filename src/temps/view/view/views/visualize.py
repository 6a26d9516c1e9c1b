# SPDX-License-Identifier: MIT

import pendulum
import typer

from temps.time import date_to_display_str
from temps.view.view.views.header import header


def day_report(date: pendulum.Date, rows: list[str]) -> None:
    header(f"timeline for {date.format('dddd')} ({date_to_display_str(date)})")

    if len(rows) == 0:
        typer.echo("nothing tracked on this day")
        return

    for row in rows:
        typer.echo(row)
