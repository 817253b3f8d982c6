"""Config file discovery.

randclass.toml is found by walking up from the working directory, the
way git finds .git/. The RANDCLASS_CONFIG env var pins an explicit file
and disables the walk.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "randclass.toml"
CONFIG_ENV_VAR = "RANDCLASS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest randclass.toml at or above *start* (default: cwd).

    When RANDCLASS_CONFIG is set, returns that path if it is a file and
    None otherwise.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        pinned = Path(env_path)
        return pinned if pinned.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
