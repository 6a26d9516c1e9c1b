# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def truncate_to_seconds(datetime: pendulum.DateTime) -> pendulum.DateTime:
    return datetime.set(microsecond=0)


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    parsed = pendulum.parse(datetime)
    if not isinstance(parsed, pendulum.DateTime):
        raise ValueError(f"'{datetime}' is not a date and time")
    return parsed


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None or datetime == "":
        return None
    return datetime_from_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("MMM DD")


def duration_to_str(duration: pendulum.Duration) -> str:
    total_minutes = int(duration.total_seconds()) // 60
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def duration_from_str(duration: str) -> pendulum.Duration:
    """Parse an `HH:MM` or `HH:MM:SS` clock duration."""
    parts = list(map(int, duration.split(":")))
    if len(parts) == 2:
        hours, minutes = parts
        seconds = 0
    elif len(parts) == 3:
        hours, minutes, seconds = parts
    else:
        raise ValueError(f"'{duration}' is not in HH:MM or HH:MM:SS format")
    if not (0 <= hours <= 23 and 0 <= minutes <= 59 and 0 <= seconds <= 59):
        raise ValueError(f"'{duration}' is not a time of day")
    return pendulum.duration(hours=hours, minutes=minutes, seconds=seconds)


def duration_in_minutes(duration: pendulum.Duration) -> int:
    """Whole minutes in a duration, truncated toward zero."""
    return int(duration.total_seconds() / 60)


def duration_to_hours_str(duration: pendulum.Duration) -> str:
    return f"{duration_in_minutes(duration) / 60:.2f}"


def duration_to_human_str(duration: pendulum.Duration) -> str:
    """
    Format a duration as hours and minutes, e.g. `16m`, `1h 4m` or `66h 40m`.
    Hours are omitted when zero.
    """
    minutes = duration_in_minutes(duration)
    hours = minutes // 60
    minutes = minutes % 60

    result = ""
    if hours > 0:
        result += f"{hours}h "
    return result + f"{minutes}m"


def span(start: pendulum.DateTime, end: pendulum.DateTime) -> pendulum.Duration:
    """Elapsed time from start to end, never below zero."""
    seconds = (end - start).total_seconds()
    return pendulum.duration(seconds=max(seconds, 0))


def days_between(earlier: pendulum.Date, later: pendulum.Date) -> int:
    """Signed number of calendar days from earlier to later."""
    return later.toordinal() - earlier.toordinal()
