import pendulum
import pytest

from temps.model.interval import InvalidIntervalError
from temps.service.interval import (
    close_interval,
    create_interval,
    is_ongoing,
    validate_intervals,
)

NOW = pendulum.datetime(2021, 5, 5, 12, 0, tz="UTC")


def test_create_interval_is_open_and_truncated():
    start = pendulum.datetime(2021, 5, 5, 9, 30, 15, 123456, tz="UTC")
    interval = create_interval("A", start, NOW)
    assert interval["project"] == "A"
    assert interval["start"] == pendulum.datetime(2021, 5, 5, 9, 30, 15, tz="UTC")
    assert is_ongoing(interval)


def test_create_interval_rejects_future_start():
    with pytest.raises(InvalidIntervalError):
        create_interval("A", NOW.add(minutes=1), NOW)


def test_create_interval_rejects_empty_project():
    with pytest.raises(InvalidIntervalError):
        create_interval("", NOW, NOW)


def test_create_interval_rejects_start_before_previous_entry():
    previous = create_interval("A", NOW.subtract(hours=1), NOW)
    with pytest.raises(InvalidIntervalError):
        create_interval("B", NOW.subtract(hours=2), NOW, after=previous)


def test_close_interval_sets_end_without_touching_original():
    interval = create_interval("A", NOW.subtract(hours=1), NOW)
    closed = close_interval(interval, NOW, NOW)
    assert closed["end"] == NOW
    assert not is_ongoing(closed)
    assert is_ongoing(interval)


def test_close_interval_rejects_end_before_start():
    interval = create_interval("A", NOW.subtract(hours=1), NOW)
    with pytest.raises(InvalidIntervalError):
        close_interval(interval, NOW.subtract(hours=2), NOW)


def test_close_interval_rejects_future_end():
    interval = create_interval("A", NOW.subtract(hours=1), NOW)
    with pytest.raises(InvalidIntervalError):
        close_interval(interval, NOW.add(hours=1), NOW)


def test_validate_intervals_accepts_well_formed_log():
    validate_intervals(
        [
            {"project": "A", "start": NOW.subtract(hours=3), "end": NOW.subtract(hours=2)},
            {"project": "B", "start": NOW.subtract(hours=2), "end": None},
        ],
        NOW,
    )


def test_validate_intervals_rejects_ongoing_interval_before_the_end():
    with pytest.raises(InvalidIntervalError, match="Row 1"):
        validate_intervals(
            [
                {"project": "A", "start": NOW.subtract(hours=3), "end": None},
                {"project": "B", "start": NOW.subtract(hours=2), "end": None},
            ],
            NOW,
        )


def test_validate_intervals_rejects_negative_duration():
    with pytest.raises(InvalidIntervalError, match="Row 2"):
        validate_intervals(
            [
                {"project": "A", "start": NOW.subtract(hours=5), "end": NOW.subtract(hours=4)},
                {"project": "B", "start": NOW.subtract(hours=2), "end": NOW.subtract(hours=3)},
            ],
            NOW,
        )


def test_validate_intervals_rejects_future_dates():
    with pytest.raises(InvalidIntervalError):
        validate_intervals(
            [{"project": "A", "start": NOW.subtract(hours=1), "end": NOW.add(hours=1)}],
            NOW,
        )


def test_validate_intervals_rejects_unordered_starts():
    with pytest.raises(InvalidIntervalError, match="previous"):
        validate_intervals(
            [
                {"project": "A", "start": NOW.subtract(hours=1), "end": NOW},
                {"project": "B", "start": NOW.subtract(hours=3), "end": NOW.subtract(hours=2)},
            ],
            NOW,
        )
