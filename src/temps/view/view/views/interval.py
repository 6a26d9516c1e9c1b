# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from temps.model.interval import Interval
from temps.time import datetime_to_iso_str, datetime_to_iso_str_optional
from temps.view.view.views.header import header


def intervals_report(intervals: list[Interval]) -> None:
    header("tracked intervals")

    table = Table(box=box.SIMPLE)
    table.add_column("Project")
    table.add_column("Start")
    table.add_column("End")

    for interval in intervals:
        is_open = interval["end"] is None
        table.add_row(
            Text(interval["project"]),
            datetime_to_iso_str(interval["start"]),
            datetime_to_iso_str_optional(interval["end"]) or "",
            # Underline the ongoing interval
            style="underline" if is_open else None,
        )

    console = Console()
    console.print(table)
