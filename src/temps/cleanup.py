# SPDX-License-Identifier: MIT

import atexit

from temps.repository.configuration import CONFIGURATION_REPO
from temps.repository.interval import INTERVAL_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    INTERVAL_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
