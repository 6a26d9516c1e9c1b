from typing import Optional

import pendulum

from temps.model.interval import Interval
from temps.service.visualize import Slot, build_slots, render_rows, visualize_day

DATE = pendulum.date(2021, 5, 5)
NOW = pendulum.datetime(2021, 5, 6, 12, 0, tz="UTC")


def make_interval(
    project: str, start: pendulum.DateTime, end: Optional[pendulum.DateTime] = None
) -> Interval:
    return {"project": project, "start": start, "end": end}


def at(hour: int, minute: int = 0, day: int = 5) -> pendulum.DateTime:
    return pendulum.datetime(2021, 5, day, hour, minute, tz="UTC")


def test_single_hour_timeline():
    rows = visualize_day([make_interval("A", at(9), at(10))], NOW, DATE)
    assert rows == [
        "▁▁▁▁▁▁",
        "08:00 ",
        "      ",
        "      ████████ A",
        "▁▁▁▁▁▁████████",
        "10:00 ",
    ]


def test_slots_start_on_half_hour_before_first_interval():
    slots = build_slots([make_interval("A", at(9), at(10))], NOW, DATE)
    assert slots[0] == Slot(30, None)
    assert [slot.index for slot in slots] == list(range(30, 41))
    assert [slot.project for slot in slots if slot.project is not None] == ["A"] * 4


def test_sub_quarter_hour_interval_is_invisible():
    # 09:08 and 09:12 both round to the 37th quarter-hour
    assert build_slots([make_interval("A", at(9, 8), at(9, 12))], NOW, DATE) == []
    assert visualize_day([make_interval("A", at(9, 8), at(9, 12))], NOW, DATE) == []


def test_back_to_back_projects_share_a_row():
    intervals = [
        make_interval("A", at(9), at(9, 15)),
        make_interval("B", at(9, 15), at(10)),
    ]
    rows = visualize_day(intervals, NOW, DATE)
    assert rows[3] == "      ████████ A / B"
    assert rows[4] == "▁▁▁▁▁▁████████"


def test_activity_starting_mid_row_uses_lower_half_block():
    rows = visualize_day([make_interval("A", at(9, 15), at(10))], NOW, DATE)
    assert rows[3] == "      ▅▅▅▅▅▅▅▅ A"
    assert rows[4] == "▁▁▁▁▁▁████████"


def test_activity_ending_mid_row_uses_upper_half_block():
    rows = visualize_day([make_interval("A", at(9), at(9, 15))], NOW, DATE)
    assert rows[-1] == "      ▀▀▀▀▀▀▀▀ A"


def test_project_label_repeats_after_a_gap():
    intervals = [
        make_interval("A", at(9), at(9, 30)),
        make_interval("A", at(10), at(10, 30)),
    ]
    rows = visualize_day(intervals, NOW, DATE)
    assert rows[3] == "      ████████ A"
    assert rows[4] == "▁▁▁▁▁▁"
    assert rows[5] == "10:00 ████████ A"


def test_intervals_outside_the_day_are_ignored():
    intervals = [
        make_interval("yesterday", at(9, day=4), at(10, day=4)),
        make_interval("A", at(9), at(10)),
        make_interval("tomorrow", at(9, day=6), at(10, day=6)),
    ]
    assert visualize_day(intervals, NOW, DATE) == visualize_day(
        [make_interval("A", at(9), at(10))], NOW, DATE
    )


def test_interval_from_previous_day_is_clipped_at_midnight():
    rows = visualize_day([make_interval("A", at(22, day=4), at(1))], NOW, DATE)
    assert rows == [
        "      ",
        "00:00 ████████ A",
        "      ████████",
    ]


def test_interval_into_next_day_is_clipped_at_midnight():
    rows = visualize_day([make_interval("A", at(22), at(1, day=6))], NOW, DATE)
    assert rows == [
        "▁▁▁▁▁▁",
        "22:00 ████████ A",
        "      ████████",
        "      ████████",
        "▁▁▁▁▁▁████████",
        "00:00 ",
    ]


def test_ongoing_interval_ends_at_now():
    now = at(12)
    rows = visualize_day([make_interval("A", at(11))], now, DATE)
    assert rows == [
        "▁▁▁▁▁▁",
        "10:00 ",
        "      ",
        "      ████████ A",
        "▁▁▁▁▁▁████████",
        "12:00 ",
    ]


def test_rendering_is_repeatable_for_closed_intervals():
    intervals = [
        make_interval("A", at(8, 10), at(9, 40)),
        make_interval("B", at(9, 40), at(13, 5)),
    ]
    first = visualize_day(intervals, NOW, DATE)
    second = visualize_day(intervals, NOW.add(hours=5), DATE)
    assert first == second


def test_render_rows_handles_odd_slot_count():
    assert render_rows([Slot(0, None), Slot(1, "A"), Slot(2, "A")]) == [
        "00:00 ▅▅▅▅▅▅▅▅ A",
        "      ▀▀▀▀▀▀▀▀",
    ]


def test_slots_follow_wall_clock_on_daylight_saving_day():
    # Clocks skip from 02:00 to 03:00 on this day
    date = pendulum.date(2021, 3, 28)
    now = pendulum.datetime(2021, 3, 29, 12, tz="Europe/Berlin")
    interval = make_interval(
        "A",
        pendulum.datetime(2021, 3, 28, 10, tz="Europe/Berlin"),
        pendulum.datetime(2021, 3, 28, 11, tz="Europe/Berlin"),
    )
    assert visualize_day([interval], now, date) == [
        "▁▁▁▁▁▁",
        "10:00 ████████ A",
        "      ████████",
    ]
