import pendulum
import pytest

from temps.model.interval import InvalidIntervalError
from temps.repository.interval import IntervalRepository

LOG = (
    "project\tstart\tend\n"
    "alpha\t2021-05-03T09:00:00+00:00\t2021-05-03T10:30:00+00:00\n"
    "beta\t2021-05-03T12:30:00+02:00\t\n"
)


@pytest.fixture
def repository(tmp_path):
    repository = IntervalRepository()
    repository.use_path(tmp_path / "temps.tsv")
    return repository


def test_missing_file_is_an_empty_log(repository):
    assert repository.get_all_intervals() == []
    assert repository.get_last_interval() is None
    assert repository.flush() is False


def test_load_parses_rows(repository):
    repository.path.write_text(LOG)

    intervals = repository.get_all_intervals()
    assert [interval["project"] for interval in intervals] == ["alpha", "beta"]
    assert intervals[0]["start"] == pendulum.datetime(2021, 5, 3, 9, tz="UTC")
    assert intervals[0]["end"] == pendulum.datetime(2021, 5, 3, 10, 30, tz="UTC")
    assert intervals[1]["start"] == pendulum.datetime(2021, 5, 3, 10, 30, tz="UTC")
    assert intervals[1]["end"] is None
    assert repository.get_all_projects() == ["alpha", "beta"]


def test_flush_writes_tab_separated_log(repository):
    repository.save_new_interval(
        {
            "project": "alpha",
            "start": pendulum.datetime(2021, 5, 3, 9, tz="UTC"),
            "end": pendulum.datetime(2021, 5, 3, 10, 30, tz="UTC"),
        }
    )
    repository.save_new_interval(
        {
            "project": "beta",
            "start": pendulum.datetime(
                2021, 5, 3, 12, 30, tz=pendulum.fixed_timezone(2 * 3600)
            ),
            "end": None,
        }
    )

    assert repository.flush() is True
    assert repository.path.read_text() == LOG
    assert repository.flush() is False


def test_stop_and_cancel_last_interval(repository):
    repository.path.write_text(LOG)

    last = repository.get_last_interval()
    assert last is not None
    last["end"] = pendulum.datetime(2021, 5, 3, 11, tz="UTC")
    repository.update_last_interval(last)
    assert repository.get_all_intervals()[-1]["end"] is not None

    removed = repository.remove_last_interval()
    assert removed["project"] == "beta"
    assert len(repository.get_all_intervals()) == 1
    assert repository.is_dirty


def test_unparseable_date_names_the_row(repository):
    repository.path.write_text(
        "project\tstart\tend\n"
        "alpha\t2021-05-03T09:00:00+00:00\t2021-05-03T10:00:00+00:00\n"
        "beta\tyesterday-ish\t\n"
    )

    with pytest.raises(InvalidIntervalError, match="Row 2"):
        repository.get_all_intervals()


def test_invariant_violations_are_reported_on_load(repository):
    repository.path.write_text(
        "project\tstart\tend\n"
        "alpha\t2021-05-03T09:00:00+00:00\t2021-05-03T08:00:00+00:00\n"
    )

    with pytest.raises(InvalidIntervalError, match="before start"):
        repository.get_all_intervals()


def test_invalid_log_is_not_cached_after_failed_load(repository):
    repository.path.write_text(
        "project\tstart\tend\n"
        "alpha\t2021-05-03T09:00:00+00:00\t2021-05-03T08:00:00+00:00\n"
    )

    with pytest.raises(InvalidIntervalError):
        repository.get_all_intervals()
    with pytest.raises(InvalidIntervalError):
        repository.get_all_intervals()


def test_use_path_drops_cached_log(repository, tmp_path):
    repository.path.write_text(LOG)
    assert len(repository.get_all_intervals()) == 2

    repository.use_path(tmp_path / "other.tsv")
    assert repository.get_all_intervals() == []
