# SPDX-License-Identifier: MIT

import os

from temps.configuration import resolve_temps_file
from temps.model.interval import InvalidIntervalError
from temps.repository.configuration import CONFIGURATION_REPO
from temps.repository.interval import INTERVAL_REPO


def complete_project(incomplete: str) -> list[str]:
    """Return list of tracked projects for shell completion."""

    # Completion runs without the app callback, so resolve the file here
    temps_file = os.environ.get("TEMPS_FILE") or CONFIGURATION_REPO.get_config()["temps_file"]
    INTERVAL_REPO.use_path(resolve_temps_file(temps_file))
    try:
        all_projects = INTERVAL_REPO.get_all_projects()
    except InvalidIntervalError:
        return []
    return [project for project in all_projects if project.startswith(incomplete)]
