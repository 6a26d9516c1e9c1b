# SPDX-License-Identifier: MIT

from contextvars import ContextVar

import pendulum

_midnight_offset: ContextVar[pendulum.Duration] = ContextVar(
    "midnight_offset", default=pendulum.duration()
)


def set_midnight_offset(value: pendulum.Duration) -> None:
    _midnight_offset.set(value)


def get_midnight_offset() -> pendulum.Duration:
    return _midnight_offset.get()
