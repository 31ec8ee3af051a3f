"""SQLite schema for the state store.

Notes
-----
One row per persisted collection. The value column holds the collection as a
JSON array; there is no schema version and no migration.
"""

from __future__ import annotations

SCHEMA_V1 = """
PRAGMA journal_mode = WAL;

CREATE TABLE IF NOT EXISTS kv (
    key   TEXT PRIMARY KEY,
    value TEXT NOT NULL
);
"""
