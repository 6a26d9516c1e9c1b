# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum


class Interval(TypedDict):
    project: str
    start: pendulum.DateTime
    end: Optional[pendulum.DateTime]


class InvalidIntervalError(ValueError):
    """An interval breaks one of the log invariants."""
