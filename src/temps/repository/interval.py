# SPDX-License-Identifier: MIT

import csv
import logging
from copy import deepcopy
from pathlib import Path
from typing import Optional

from temps import configuration, time
from temps.model.interval import Interval, InvalidIntervalError
from temps.service.interval import validate_intervals

logger = logging.getLogger(__name__)

FIELDNAMES = ["project", "start", "end"]


class IntervalRepository:
    def __init__(self) -> None:
        self._path: Optional[Path] = None
        self._intervals: Optional[list[Interval]] = None
        self.is_dirty = False

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = configuration.resolve_temps_file(None)
        return self._path

    def use_path(self, path: Path) -> None:
        """Point the repository at another tracking file, dropping unsaved state."""
        if path != self._path:
            self._path = path
            self._intervals = None
            self.is_dirty = False

    @property
    def intervals(self) -> list[Interval]:
        if self._intervals is None:
            self.__load_data()
        if self._intervals is None:
            raise ValueError()
        return self._intervals

    def __load_data(self) -> None:
        if not self.path.is_file():
            logger.debug("No tracking file at %s yet", self.path)
            self._intervals = []
            return

        intervals: list[Interval] = []
        with self.path.open(newline="") as file:
            reader = csv.DictReader(file, delimiter="\t")
            for row_number, row in enumerate(reader, start=1):
                intervals.append(
                    self.__convert_interval_for_deserialization(row, row_number)
                )

        # Only cache a log that passed validation
        validate_intervals(intervals, time.now_local())
        self._intervals = intervals
        logger.debug("Loaded %d intervals from %s", len(intervals), self.path)

    def __save_data(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="") as file:
            writer = csv.DictWriter(
                file, fieldnames=FIELDNAMES, delimiter="\t", lineterminator="\n"
            )
            writer.writeheader()
            for interval in self.intervals:
                writer.writerow(self.__convert_interval_for_serialization(interval))
        logger.debug("Wrote %d intervals to %s", len(self.intervals), self.path)

    def flush(self) -> bool:
        if self._intervals is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_interval_for_serialization(self, interval: Interval) -> dict[str, str]:
        return {
            "project": interval["project"],
            "start": time.datetime_to_iso_str(interval["start"]),
            "end": time.datetime_to_iso_str_optional(interval["end"]) or "",
        }

    def __convert_interval_for_deserialization(
        self, row: dict[str, Optional[str]], row_number: int
    ) -> Interval:
        project = row.get("project")
        start = row.get("start")
        if project is None or project == "":
            raise InvalidIntervalError(f"Row {row_number}: missing project")
        if start is None or start == "":
            raise InvalidIntervalError(f"Row {row_number}: missing start date")

        try:
            return {
                "project": project,
                "start": time.datetime_from_str(start),
                "end": time.datetime_from_str_optional(row.get("end")),
            }
        except ValueError as e:
            raise InvalidIntervalError(f"Row {row_number}: {e}") from e

    def get_all_intervals(self) -> list[Interval]:
        return deepcopy(self.intervals)

    def get_last_interval(self) -> Optional[Interval]:
        if len(self.intervals) == 0:
            return None
        return deepcopy(self.intervals[-1])

    def save_new_interval(self, interval: Interval) -> None:
        self.is_dirty = True
        self.intervals.append(deepcopy(interval))

    def update_last_interval(self, interval: Interval) -> None:
        if len(self.intervals) == 0:
            raise ValueError("No previous entry exists")
        self.is_dirty = True
        self.intervals[-1] = deepcopy(interval)

    def remove_last_interval(self) -> Interval:
        if len(self.intervals) == 0:
            raise ValueError("No previous entry exists")
        self.is_dirty = True
        return self.intervals.pop()

    def get_all_projects(self) -> list[str]:
        return sorted({interval["project"] for interval in self.intervals})


INTERVAL_REPO = IntervalRepository()
