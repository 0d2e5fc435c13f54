"""Locate the amptheme.toml that applies to a working directory.

The nearest file wins, checked from the start directory up to the
filesystem root. AMPTHEME_CONFIG names a file explicitly and disables the
search; ``-c/--config`` on the command line bypasses discovery entirely.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "amptheme.toml"
CONFIG_ENV_VAR = "AMPTHEME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    An AMPTHEME_CONFIG pointing at a missing file yields None rather than
    falling back to the search, so a typo never picks up an unrelated file.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
