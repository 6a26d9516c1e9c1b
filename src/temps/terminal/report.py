# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from temps import state as app_state
from temps.repository.interval import INTERVAL_REPO
from temps.service.summary import daily_summary, full_summary, weekly_summary
from temps.service.visualize import visualize_day
from temps.terminal.parse import parse_date
from temps.time import now_local
from temps.view.view.views import summary as summary_report
from temps.view.view.views import visualize as visualize_report


def summary(
    full: Annotated[
        bool, typer.Option("--full", "-f", help="Time tracked forever")
    ] = False,
    weekly: Annotated[
        bool, typer.Option("--weekly", "-w", help="Time tracked in the past week")
    ] = False,
    daily: Annotated[
        bool, typer.Option("--daily", "-d", help="Time tracked today (default)")
    ] = False,
) -> None:
    """
    display a summary of the time tracked per project
    """
    if [full, weekly, daily].count(True) > 1:
        raise typer.BadParameter("--full, --weekly and --daily are mutually exclusive")

    now = now_local()
    intervals = INTERVAL_REPO.get_all_intervals()
    midnight_offset = app_state.get_midnight_offset()

    if full:
        summary_report.full_summary_report(full_summary(intervals, now))
    elif weekly:
        summary_report.weekly_summary_report(
            weekly_summary(intervals, now, midnight_offset)
        )
    else:
        summary_report.daily_summary_report(
            daily_summary(intervals, now, midnight_offset)
        )


def viz(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Argument(
            parser=parse_date,
            help="Date (defaults to today). valid inputs: YYYY-MM-DD, today, yesterday, N days ago",
        ),
    ] = None,
) -> None:
    """
    visualize time spent on a given day
    """
    now = now_local()
    if date is None:
        date = now.date()

    rows = visualize_day(INTERVAL_REPO.get_all_intervals(), now, date)
    visualize_report.day_report(date, rows)
