"""
db.py
SQLite key-value store holding the member snapshot (one JSON blob per key).
"""

from __future__ import annotations

import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable

import config
from logger import get_logger
from models import Member

logger = get_logger(__name__)


@contextmanager
def get_conn(db_file: Path | str | None = None):
    conn = sqlite3.connect(db_file or config.db_file(), check_same_thread=False)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
        conn.commit()
    finally:
        conn.close()


def execute(db_file: Path | str, sql: str, params: tuple = ()) -> int:
    with get_conn(db_file) as conn:
        cur = conn.execute(sql, params)
        return cur.lastrowid


def fetch_one(db_file: Path | str, sql: str, params: tuple = ()):
    with get_conn(db_file) as conn:
        cur = conn.execute(sql, params)
        return cur.fetchone()


def _create_tables(db_file: Path | str) -> None:
    execute(
        db_file,
        """
        CREATE TABLE IF NOT EXISTS snapshots (
            key TEXT PRIMARY KEY,
            value TEXT NOT NULL
        )
        """,
    )


def get_value(db_file: Path | str, key: str) -> str | None:
    row = fetch_one(db_file, "SELECT value FROM snapshots WHERE key = ?", (key,))
    if row:
        return str(row["value"])
    return None


def set_value(db_file: Path | str, key: str, value: str) -> None:
    execute(
        db_file,
        """
        INSERT INTO snapshots(key, value) VALUES(?, ?)
        ON CONFLICT(key) DO UPDATE SET value=excluded.value
        """,
        (key, value),
    )


def delete_value(db_file: Path | str, key: str) -> None:
    execute(db_file, "DELETE FROM snapshots WHERE key = ?", (key,))


class SnapshotStore:
    """
    Persists the registry as a field-for-field JSON dump under one key.
    Every save overwrites the previous snapshot.
    """

    def __init__(self, db_file: Path | str | None = None, key: str | None = None) -> None:
        self.db_file = Path(db_file) if db_file else config.db_file()
        self.key = key or config.snapshot_key()
        _create_tables(self.db_file)

    def load(self) -> list[Member]:
        raw = get_value(self.db_file, self.key)
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Snapshot %r in %s is not valid JSON; starting empty", self.key, self.db_file)
            return []
        return [Member.from_dict(r) for r in records]

    def save(self, members: Iterable[Member]) -> None:
        records = [m.to_dict() for m in members]
        set_value(self.db_file, self.key, json.dumps(records, ensure_ascii=False))
        logger.debug("Saved snapshot %r (%d members)", self.key, len(records))

    def clear(self) -> None:
        delete_value(self.db_file, self.key)
