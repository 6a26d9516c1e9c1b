# SPDX-License-Identifier: MIT

from typing import NamedTuple, Optional

import pendulum

from temps.model.interval import Interval

FULL_BLOCK = "█"
UPPER_HALF_BLOCK = "▀"
LOWER_HALF_BLOCK = "▅"
BLOCK_WIDTH = 8

MINUTES_PER_SLOT = 15
SLOTS_PER_DAY = 24 * 60 // MINUTES_PER_SLOT
# Slots between two clock labels (two hours)
SLOTS_PER_MARK = 8

TIME_PADDING = "      "
HALF_MARK_PADDING = "▁▁▁▁▁▁"


class Slot(NamedTuple):
    index: int
    project: Optional[str]


def build_slots(
    intervals: list[Interval],
    now: pendulum.DateTime,
    date: pendulum.Date,
) -> list[Slot]:
    """
    Split the given day into quarter-hour slots occupied by projects.

    Slot indices count quarter-hours of wall clock time since midnight, the
    following midnight being index 96. The list starts on a
    half-hour boundary shortly before the first activity, gaps between
    intervals are filled with empty slots, and intervals shorter than a
    quarter-hour after rounding are dropped.
    """
    window_start = pendulum.datetime(date.year, date.month, date.day, tz=now.timezone)
    window_end = window_start.add(days=1)

    slots: list[Slot] = []
    previous_end: Optional[int] = None

    for interval in intervals:
        start = interval["start"]
        end = interval["end"] if interval["end"] is not None else now

        if not (start < window_end and end >= window_start):
            continue

        first = __slot_index(max(start, window_start), window_end)
        last = __slot_index(min(end, window_end), window_end)
        if first == last:
            continue

        # Lead in on a half-hour so the clock labels line up
        if previous_end is None:
            previous_end = (first // SLOTS_PER_MARK) * SLOTS_PER_MARK - 2

        slots.extend(Slot(index, None) for index in range(previous_end, first))
        previous_end = last

        slots.extend(
            Slot(index, interval["project"]) for index in range(first, last)
        )

    # Pad up to the next clock label when the timeline stops just short of it
    if len(slots) > 0 and slots[-1].index % SLOTS_PER_MARK >= SLOTS_PER_MARK - 2:
        last_index = slots[-1].index
        next_mark = (last_index // SLOTS_PER_MARK + 1) * SLOTS_PER_MARK
        slots.extend(Slot(index, None) for index in range(last_index + 1, next_mark + 1))

    return slots


def render_rows(slots: list[Slot]) -> list[str]:
    """
    Render slots two at a time, one half-hour per row.

    A project name is written next to the blocks when it differs from the
    project of the row above.
    """
    rows: list[str] = []
    previous_project: Optional[str] = None

    for i in range(0, len(slots), 2):
        pair = slots[i : i + 2]
        first = pair[0].project
        second = pair[1].project if len(pair) == 2 else None

        row = __row_prefix(pair[0].index)
        if first is None and second is None:
            previous_project = None
        elif first is None:
            row += LOWER_HALF_BLOCK * BLOCK_WIDTH + f" {second}"
            previous_project = second
        elif second is None:
            row += UPPER_HALF_BLOCK * BLOCK_WIDTH
            if previous_project != first:
                row += f" {first}"
            previous_project = None
        else:
            row += FULL_BLOCK * BLOCK_WIDTH
            if previous_project != first:
                row += f" {first}"
                if first != second:
                    row += f" / {second}"
            elif first != second:
                row += f" {second}"
            previous_project = second

        rows.append(row)

    return rows


def visualize_day(
    intervals: list[Interval],
    now: pendulum.DateTime,
    date: pendulum.Date,
) -> list[str]:
    return render_rows(build_slots(intervals, now, date))


def __slot_index(instant: pendulum.DateTime, window_end: pendulum.DateTime) -> int:
    # Wall clock minutes, not elapsed minutes
    if instant >= window_end:
        return SLOTS_PER_DAY
    local = instant.in_tz(window_end.timezone)
    return round((local.hour * 60 + local.minute) / MINUTES_PER_SLOT)


def __row_prefix(index: int) -> str:
    if index < 0:
        return TIME_PADDING
    if index % SLOTS_PER_MARK == 0:
        minutes = index * MINUTES_PER_SLOT
        return f"{(minutes // 60) % 24:02d}:{minutes % 60:02d} "
    if index % SLOTS_PER_MARK == SLOTS_PER_MARK - 2:
        return HALF_MARK_PADDING
    return TIME_PADDING
