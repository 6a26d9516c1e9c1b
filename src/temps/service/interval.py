# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from temps.model.interval import Interval, InvalidIntervalError
from temps.template.interval import get_interval_template
from temps.time import datetime_to_iso_str, truncate_to_seconds

logger = logging.getLogger(__name__)


def is_ongoing(interval: Interval) -> bool:
    return interval["end"] is None


def create_interval(
    project: str,
    start: pendulum.DateTime,
    now: pendulum.DateTime,
    after: Optional[Interval] = None,
) -> Interval:
    """
    Start a new open interval.

    Args:
        project: Project name
        start: Start of the interval
        now: Current instant
        after: The interval the new one is appended after, if any

    Raises:
        InvalidIntervalError: If the project is empty, the start is in the
            future or the start is before the start of `after`
    """
    if project == "":
        raise InvalidIntervalError("Project name cannot be empty")
    if start > now:
        raise InvalidIntervalError(
            f"Start date {datetime_to_iso_str(start)} is in the future"
        )
    start = truncate_to_seconds(start)
    if after is not None and start < after["start"]:
        raise InvalidIntervalError(
            f"Start date {datetime_to_iso_str(start)} is before the start of "
            f"the previous entry ({datetime_to_iso_str(after['start'])})"
        )
    return get_interval_template(project, start)


def close_interval(
    interval: Interval, end: pendulum.DateTime, now: pendulum.DateTime
) -> Interval:
    """
    Return a copy of the interval stopped at `end`.

    Raises:
        InvalidIntervalError: If the end is in the future or before the start
    """
    if end > now:
        raise InvalidIntervalError(
            f"End date {datetime_to_iso_str(end)} is in the future"
        )
    if end < interval["start"]:
        raise InvalidIntervalError(
            f"End date {datetime_to_iso_str(end)} is before start date "
            f"{datetime_to_iso_str(interval['start'])}"
        )
    closed = interval.copy()
    closed["end"] = truncate_to_seconds(end)
    return closed


def validate_intervals(intervals: list[Interval], now: pendulum.DateTime) -> None:
    """
    Check the invariants of a freshly loaded log.

    Row numbers in error messages are 1-based and do not count the header.

    Raises:
        InvalidIntervalError: On the first row breaking an invariant
    """
    previous_start: Optional[pendulum.DateTime] = None
    for row, interval in enumerate(intervals, start=1):
        if interval["project"] == "":
            raise InvalidIntervalError(f"Row {row}: project name is empty")
        if interval["start"] > now:
            raise InvalidIntervalError(f"Row {row}: start date is in the future")
        if previous_start is not None and interval["start"] < previous_start:
            raise InvalidIntervalError(
                f"Row {row}: starts before the previous interval"
            )
        end = interval["end"]
        if end is None:
            if row != len(intervals):
                raise InvalidIntervalError(
                    f"Row {row}: only the last interval can be ongoing"
                )
        else:
            if end < interval["start"]:
                raise InvalidIntervalError(
                    f"Row {row}: end date is before start date"
                )
            if end > now:
                raise InvalidIntervalError(f"Row {row}: end date is in the future")
        previous_start = interval["start"]
    logger.debug("Validated %d intervals", len(intervals))
