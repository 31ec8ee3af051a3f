"""
SQLite implementation of KeyValueStore.

This module owns the on-disk persistence format for calculator state.

Threading
---------
A connection is opened per call and never shared. The GUI calls the store on
the Qt main thread only.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass
from pathlib import Path

from ..paths import state_db_path
from .api import KeyValueStore
from .errors import StateStoreError
from .schema import SCHEMA_V1


@dataclass(frozen=True, slots=True)
class SqliteKeyValueStore(KeyValueStore):
    """
    SQLite-backed KeyValueStore.

    Parameters
    ----------
    db_path:
        Path to the SQLite database.

    Notes
    -----
    The database file is created if absent. The parent directory is created as
    needed.
    """

    db_path: Path

    def __post_init__(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with self._connect() as conn:
                conn.executescript(SCHEMA_V1)
        except (OSError, sqlite3.Error) as exc:
            raise StateStoreError(f"Failed to open state store: {self.db_path}") from exc

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def get_text(self, key: str) -> str | None:
        """See KeyValueStore.get_text."""
        try:
            with self._connect() as conn:
                row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        except sqlite3.Error as exc:
            raise StateStoreError(f"Failed to read {key!r} from {self.db_path}") from exc
        if row is None:
            return None
        return str(row["value"])

    def set_text(self, key: str, value: str) -> None:
        """See KeyValueStore.set_text."""
        try:
            with self._connect() as conn:
                conn.execute(
                    "INSERT INTO kv(key, value) VALUES(?, ?) "
                    "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                    (key, value),
                )
        except sqlite3.Error as exc:
            raise StateStoreError(f"Failed to write {key!r} to {self.db_path}") from exc


def open_state_store(data_root: Path | None = None) -> SqliteKeyValueStore:
    """
    Convenience constructor for the default on-disk store.

    Parameters
    ----------
    data_root:
        Optional override for the data root.

    Returns
    -------
    SqliteKeyValueStore
        Ready-to-use SQLite-backed store at ``<data_root>/paintcalc.sqlite``.

    Raises
    ------
    StateStoreError
        If the database cannot be created or opened.
    """
    return SqliteKeyValueStore(db_path=state_db_path(data_root))
