"""Locate tzctl.toml.

Lookup order: the TZCTL_CONFIG env var (the --config flag is handled by
the caller), then a walk up from the working directory, then the
per-user file under ``$XDG_CONFIG_HOME/tzctl/``. A project file lets a
team pin its own catalog and tracked zones; the user file holds the
everyday source zone.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tzctl.toml"
CONFIG_ENV_VAR = "TZCTL_CONFIG"
APP_DIR = "tzctl"


def user_config_path() -> Path:
    """Per-user config location; ``~/.config`` when XDG_CONFIG_HOME is unset."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_DIR / CONFIG_FILENAME


def find_config(start: Path | None = None) -> Path | None:
    """Find the tzctl.toml that applies to *start* (default: cwd).

    An explicit TZCTL_CONFIG wins outright, even when it points at a
    missing file (then nothing is loaded). Otherwise the nearest project
    file wins over the user file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate

    user_file = user_config_path()
    if user_file.is_file():
        return user_file
    return None
