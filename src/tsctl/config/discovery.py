"""Config file discovery.

Lookup order:
  1. ``TSCTL_CONFIG``: an explicit file, no further search when set
  2. ``tsctl.toml`` or ``.tsctl.toml``, walking up from the start directory
  3. the per-user file, ``$XDG_CONFIG_HOME/tsctl/config.toml``
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tsctl.toml"
HIDDEN_CONFIG_FILENAME = ".tsctl.toml"
CONFIG_ENV_VAR = "TSCTL_CONFIG"

# Checked in this order inside each directory.
_PROJECT_FILENAMES = (CONFIG_FILENAME, HIDDEN_CONFIG_FILENAME)


def user_config_path() -> Path:
    """The per-user config file location (which may not exist)."""
    base = os.environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / "tsctl" / "config.toml"


def _walk_up(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        for name in _PROJECT_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for a run started in *start* (default: cwd).

    Returns None when no file exists. A ``TSCTL_CONFIG`` that names a
    missing file also yields None rather than falling through.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    found = _walk_up((start or Path.cwd()).resolve())
    if found is not None:
        return found
    user = user_config_path()
    return user if user.is_file() else None
