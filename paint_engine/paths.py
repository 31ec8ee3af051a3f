"""
Data root resolution.

All durable state lives under a single "data root" directory. This module is
the one place that decides where that is.

Preference order for the default root:

1) ``PAINTCALC_DATA_ROOT`` if set (used as-is)
2) ``%LOCALAPPDATA%\\paintcalc`` then ``%APPDATA%\\paintcalc`` (Windows)
3) ``$XDG_DATA_HOME/paintcalc``
4) ``~/.local/share/paintcalc``
"""

from __future__ import annotations

import os
from pathlib import Path

APP_DIR_NAME = "paintcalc"
DATA_ROOT_ENV = "PAINTCALC_DATA_ROOT"
STATE_DB_NAME = "paintcalc.sqlite"


def default_data_root() -> Path:
    """
    Resolve the default data root.

    Returns
    -------
    pathlib.Path
        Directory under which the state database is stored. Not created here.
    """
    override = os.environ.get(DATA_ROOT_ENV)
    if override:
        return Path(override).expanduser()

    local = os.environ.get("LOCALAPPDATA")
    if local:
        return Path(local) / APP_DIR_NAME

    roaming = os.environ.get("APPDATA")
    if roaming:
        return Path(roaming) / APP_DIR_NAME

    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_DIR_NAME

    return Path.home() / ".local" / "share" / APP_DIR_NAME


def state_db_path(data_root: Path | None = None) -> Path:
    """
    Return the canonical path of the state database.

    Parameters
    ----------
    data_root:
        Optional override for the data root.

    Returns
    -------
    pathlib.Path
        ``<data_root>/paintcalc.sqlite``.
    """
    root = default_data_root() if data_root is None else data_root
    return root / STATE_DB_NAME
