# SPDX-License-Identifier: MIT

from typing import Optional

import typer
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from temps.model.summary import DailySummary, FullSummary, Ongoing, WeeklySummary
from temps.service.summary import DAYS_IN_WEEK, week_days_oldest_first
from temps.time import (
    date_to_display_str,
    duration_to_hours_str,
    duration_to_human_str,
)
from temps.view.view.views.header import header


def full_summary_report(summary: FullSummary) -> None:
    header("summary of all time")

    table = Table(box=box.SIMPLE)
    table.add_column("Project")
    table.add_column("Hours", justify="right")
    for project, duration in summary["projects"].items():
        table.add_row(Text(project), duration_to_hours_str(duration))

    console = Console()
    console.print(table)

    __ongoing_report(summary["ongoing"])


def daily_summary_report(summary: DailySummary) -> None:
    header(f"summary for today ({date_to_display_str(summary['date'])})")

    table = Table(box=box.SIMPLE)
    table.add_column("Project")
    table.add_column("Hours", justify="right")
    for project, duration in summary["projects"].items():
        table.add_row(Text(project), duration_to_hours_str(duration))
    table.add_section()
    table.add_row("TOTAL", duration_to_hours_str(summary["total"]), style="bold")

    console = Console()
    console.print(table)

    __ongoing_report(summary["ongoing"])


def weekly_summary_report(summary: WeeklySummary) -> None:
    header("summary for the past week")

    table = Table(box=box.SIMPLE)
    table.add_column("Project")
    for day in week_days_oldest_first(summary["today"]):
        table.add_column(day.format("dddd"), justify="right")

    # Durations are stored newest first, columns run oldest first
    for project, durations in summary["projects"].items():
        table.add_row(
            Text(project),
            *[duration_to_hours_str(duration) for duration in reversed(durations)],
        )
    table.add_section()
    table.add_row(
        "TOTAL",
        *[duration_to_hours_str(duration) for duration in reversed(summary["totals"])],
        style="bold",
    )

    console = Console()
    console.print(table)

    weekly_total = summary["totals"][0]
    for days_ago in range(1, DAYS_IN_WEEK):
        weekly_total = weekly_total + summary["totals"][days_ago]
    typer.echo(f"Weekly total: {duration_to_hours_str(weekly_total)} hours")

    __ongoing_report(summary["ongoing"])


def __ongoing_report(ongoing: Optional[Ongoing]) -> None:
    if ongoing is None:
        return
    typer.echo()
    typer.echo(
        f"Ongoing: {ongoing['project']} ({duration_to_human_str(ongoing['duration'])})"
    )
