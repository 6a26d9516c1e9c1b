# SPDX-License-Identifier: MIT

import pendulum

from temps.model.interval import Interval


def get_interval_template(project: str, start: pendulum.DateTime) -> Interval:
    return {
        "project": project,
        "start": start,
        "end": None,
    }
