"""Locate agecalc.toml.

``AGECALC_CONFIG`` names the file outright. Otherwise the nearest
``agecalc.toml`` in the start directory or one of its ancestors wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "agecalc.toml"
CONFIG_ENV_VAR = "AGECALC_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Path of the config file to load, or None when there is none.

    A set ``AGECALC_CONFIG`` that points at a missing file disables
    discovery instead of falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
