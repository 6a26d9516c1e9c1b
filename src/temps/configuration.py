# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs

APP_NAME = "temps"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

DEFAULT_TEMPS_FILE = "~/temps.tsv"
DEFAULT_MIDNIGHT_OFFSET = "00:00"


class Configuration(TypedDict):
    temps_file: Optional[str]
    midnight_offset: str
    show_header: bool


def get_default_configuration() -> Configuration:
    return {
        "temps_file": None,
        "midnight_offset": DEFAULT_MIDNIGHT_OFFSET,
        "show_header": True,
    }


def resolve_temps_file(temps_file: Optional[str]) -> Path:
    """Expand the configured tracking file, falling back to the default location."""
    if temps_file is None or temps_file == "":
        temps_file = DEFAULT_TEMPS_FILE
    return Path(temps_file).expanduser()
