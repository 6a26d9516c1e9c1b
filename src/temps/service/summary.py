# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from temps.model.interval import Interval
from temps.model.summary import DailySummary, FullSummary, Ongoing, WeeklySummary
from temps.service.interval import is_ongoing
from temps.time import days_between, span

DAYS_IN_WEEK = 7


def get_ongoing(intervals: list[Interval], now: pendulum.DateTime) -> Optional[Ongoing]:
    """The project and elapsed time of the open interval, if the last one is open."""
    if len(intervals) == 0 or not is_ongoing(intervals[-1]):
        return None
    last = intervals[-1]
    return {"project": last["project"], "duration": span(last["start"], now)}


def full_summary(intervals: list[Interval], now: pendulum.DateTime) -> FullSummary:
    """Total time per project over the whole log."""
    projects: dict[str, pendulum.Duration] = {}
    for interval in intervals:
        end = interval["end"] if interval["end"] is not None else now
        duration = span(interval["start"], end)
        projects[interval["project"]] = (
            projects.get(interval["project"], pendulum.duration()) + duration
        )

    return {
        "projects": dict(sorted(projects.items())),
        "ongoing": get_ongoing(intervals, now),
    }


def daily_summary(
    intervals: list[Interval],
    now: pendulum.DateTime,
    midnight_offset: pendulum.Duration,
) -> DailySummary:
    """
    Total time per project for the current day.

    The day starts at `midnight_offset` past midnight. Only intervals ending
    today are counted, and time before the start of the day is cut off.
    """
    shifted_now = now - midnight_offset
    today = shifted_now.date()
    midnight = shifted_now.start_of("day")

    projects: dict[str, pendulum.Duration] = {}
    total = pendulum.duration()
    for interval in intervals:
        start, end = __shifted_bounds(interval, now, midnight_offset)
        if end.date() != today:
            continue

        duration = span(max(start, midnight), end)
        projects[interval["project"]] = (
            projects.get(interval["project"], pendulum.duration()) + duration
        )
        total = total + duration

    return {
        "date": today,
        "projects": dict(sorted(projects.items())),
        "total": total,
        "ongoing": get_ongoing(intervals, now),
    }


def weekly_summary(
    intervals: list[Interval],
    now: pendulum.DateTime,
    midnight_offset: pendulum.Duration,
) -> WeeklySummary:
    """
    Total time per project for each of the last seven days.

    Intervals spanning several days are split at each day boundary. Anything
    older than six days before today is left out.
    """
    shifted_now = now - midnight_offset
    today = shifted_now.date()
    midnight = shifted_now.start_of("day")

    projects: dict[str, list[pendulum.Duration]] = {}
    totals = [pendulum.duration() for _ in range(DAYS_IN_WEEK)]
    for interval in intervals:
        start, end = __shifted_bounds(interval, now, midnight_offset)

        first_day = max(days_between(end.date(), today), 0)
        last_day = min(DAYS_IN_WEEK - 1, days_between(start.date(), today))
        for days_ago in range(first_day, last_day + 1):
            day_start = midnight.subtract(days=days_ago)
            day_end = day_start.add(days=1)
            duration = span(max(start, day_start), min(end, day_end))

            durations = projects.setdefault(
                interval["project"],
                [pendulum.duration() for _ in range(DAYS_IN_WEEK)],
            )
            durations[days_ago] = durations[days_ago] + duration
            totals[days_ago] = totals[days_ago] + duration

    return {
        "today": today,
        "projects": dict(sorted(projects.items())),
        "totals": totals,
        "ongoing": get_ongoing(intervals, now),
    }


def week_days_oldest_first(today: pendulum.Date) -> list[pendulum.Date]:
    return [today.subtract(days=days_ago) for days_ago in reversed(range(DAYS_IN_WEEK))]


def __shifted_bounds(
    interval: Interval,
    now: pendulum.DateTime,
    midnight_offset: pendulum.Duration,
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    # Work in the timezone of `now` so calendar dates agree with `today`
    start = interval["start"].in_tz(now.timezone)
    end = interval["end"].in_tz(now.timezone) if interval["end"] is not None else now
    return start - midnight_offset, end - midnight_offset
