"""Key-value persistence for in-progress form snapshots."""

from __future__ import annotations

import json
import logging
import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable, Protocol, TypeVar

from formdesk.config import DB_PATH
from formdesk.models import SnapshotDecodeError

logger = logging.getLogger(__name__)

_RecordT = TypeVar("_RecordT")


class KeyValueStore(Protocol):
    """Byte store the form controllers persist their snapshots into."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...

    def remove(self, key: str) -> None: ...


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteKeyValueStore:
    """SQLite-backed snapshot store, one row per form key."""

    def __init__(self, db_path: str | Path = DB_PATH) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def bootstrap_schema(self) -> None:
        """Create persistence schema if it does not already exist."""
        with self._connect() as conn:
            conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS form_snapshots (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL,
                    updated_at TEXT NOT NULL
                );
                """
            )

    def get(self, key: str) -> bytes | None:
        with self._connect() as conn:
            row = conn.execute("SELECT value FROM form_snapshots WHERE key = ?", (key,)).fetchone()
        if row is None:
            return None
        return bytes(row[0])

    def set(self, key: str, value: bytes) -> None:
        with self._connect() as conn:
            with conn:
                conn.execute(
                    """
                    INSERT INTO form_snapshots (key, value, updated_at) VALUES (?, ?, ?)
                    ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at
                    """,
                    (key, sqlite3.Binary(value), _utc_now_iso()),
                )

    def remove(self, key: str) -> None:
        with self._connect() as conn:
            with conn:
                conn.execute("DELETE FROM form_snapshots WHERE key = ?", (key,))


class MemoryKeyValueStore:
    """Dict-backed store, handy for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self.data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self.data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self.data[key] = bytes(value)

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


def encode_snapshot(record: Any) -> bytes:
    """Serialize an input record (anything with ``to_dict``) to UTF-8 JSON."""
    return json.dumps(record.to_dict(), ensure_ascii=False, sort_keys=True).encode("utf-8")


def decode_snapshot(raw: bytes, from_dict: Callable[[Any], _RecordT]) -> _RecordT:
    try:
        data = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise SnapshotDecodeError(f"snapshot is not valid JSON: {exc}") from exc
    return from_dict(data)


def save_snapshot(store: KeyValueStore, key: str, record: Any) -> None:
    store.set(key, encode_snapshot(record))


def load_snapshot(
    store: KeyValueStore,
    key: str,
    from_dict: Callable[[Any], _RecordT],
    default: Callable[[], _RecordT],
) -> _RecordT:
    """Load the persisted record for ``key``.

    Missing keys give the default record. A snapshot that fails to decode is
    removed so the next start is clean, and the default record is returned.
    """
    raw = store.get(key)
    if raw is None:
        return default()
    try:
        return decode_snapshot(raw, from_dict)
    except SnapshotDecodeError as exc:
        logger.warning("discarding corrupted snapshot key=%s error=%s", key, exc)
        store.remove(key)
        return default()
