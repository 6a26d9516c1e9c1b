# SPDX-License-Identifier: MIT

import os
import re
import subprocess
from pathlib import Path
from typing import Optional

import pendulum
import typer

from temps.time import duration_from_str


def parse_datetime(datetime_param: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    # Match YYYY-MM-DD format (with time component and optional UTC offset)
    if re.match(r"^\d{4}-\d{2}-\d{2}", datetime):
        try:
            parsed = pendulum.parse(datetime, tz="local")
        except ValueError:
            raise typer.BadParameter(f"Could not parse date '{datetime}'")
        if not isinstance(parsed, pendulum.DateTime):
            raise typer.BadParameter(f"'{datetime}' is not a date and time")
        return parsed

    # Match (H)H:mm or (H)H:mm:ss format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$", datetime)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))
        second = int(time_match.group(3) or 0)

        # Validate hour and minute ranges
        if hour < 0 or hour > 23:
            raise typer.BadParameter(f"Hour must be between 0 and 23, got {hour}")
        if minute < 0 or minute > 59:
            raise typer.BadParameter(f"Minute must be between 0 and 59, got {minute}")
        if second < 0 or second > 59:
            raise typer.BadParameter(f"Second must be between 0 and 59, got {second}")

        return pendulum.today("local").set(
            hour=hour, minute=minute, second=second, microsecond=0
        )

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")
    raise typer.BadParameter("Incorrect datetime format")


def parse_date(date_param: Optional[str]) -> Optional[pendulum.Date]:
    """
    Parse a calendar date.

    Accepts `YYYY-MM-DD`, `today`, `yesterday` or `N days ago`.

    Raises:
        typer.BadParameter: If the date cannot be parsed
    """
    if date_param is None:
        return None

    date = str(date_param).strip()
    today = pendulum.today("local").date()

    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return pendulum.from_format(date, "YYYY-MM-DD").date()
        except ValueError:
            raise typer.BadParameter(f"Invalid date '{date}'")

    if date == "today" or date == "t":
        return today
    if date == "yesterday" or date == "y":
        return today.subtract(days=1)

    days_ago_match = re.match(r"^(\d+)\s+days?\s+ago$", date)
    if days_ago_match:
        return today.subtract(days=int(days_ago_match.group(1)))

    raise typer.BadParameter(
        "Incorrect date format (valid inputs: YYYY-MM-DD, today, yesterday, N days ago)"
    )


def parse_duration(duration_param: Optional[str]) -> Optional[pendulum.Duration]:
    if duration_param is None:
        return None
    try:
        return duration_from_str(str(duration_param).strip())
    except ValueError:
        raise typer.BadParameter("Incorrect duration format (expected HH:MM[:SS])")


def open_editor_for_file(path: Path) -> None:
    """
    Open the user's preferred editor on a file and wait for it to exit.
    """
    # Get the editor from environment, default to nano
    editor = os.environ.get("EDITOR", "nano")
    subprocess.run([editor, str(path)], check=True)
