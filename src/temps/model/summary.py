# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Ongoing(TypedDict):
    project: str
    duration: pendulum.Duration


class FullSummary(TypedDict):
    projects: dict[str, pendulum.Duration]
    ongoing: Optional[Ongoing]


class DailySummary(TypedDict):
    date: pendulum.Date
    projects: dict[str, pendulum.Duration]
    total: pendulum.Duration
    ongoing: Optional[Ongoing]


class WeeklySummary(TypedDict):
    # Day lists are indexed by days before `today`: 0 is today, 6 is six days ago
    today: pendulum.Date
    projects: dict[str, list[pendulum.Duration]]
    totals: list[pendulum.Duration]
    ongoing: Optional[Ongoing]
