"""
execution/store/state_store.py

Persisted State Store: a flat key/value store of JSON snapshots.

Each key is written independently; there is no transaction spanning more
than one key. Unset keys and undecodable values both read back as None so
callers can fall back to their defaults.
"""

import json
import logging
from datetime import datetime, timezone

from execution.db.sqlite import connect, init_db

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Snapshot keys
# ---------------------------------------------------------------------------
USER_KEY = "dga_user"
MODULES_KEY = "dga_modules"
PROGRESS_KEY = "dga_progress"


def _utc_now() -> str:
    """Return the current UTC time as an ISO 8601 string."""
    return datetime.now(timezone.utc).isoformat()


def save(key: str, value: object, db_path: str | None = None) -> None:
    """Serialize *value* as JSON and upsert it under *key*.

    Args:
        key:     Snapshot key (e.g. USER_KEY).
        value:   Any JSON-serializable value, including None.
        db_path: Path to the SQLite file; defaults to tmp/app.db.

    Raises:
        TypeError: If value is not JSON-serializable (nothing is written).
    """
    value_json = json.dumps(value)

    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute(
            """
            INSERT INTO kv_store (key, value_json, updated_at)
            VALUES (?, ?, ?)
            ON CONFLICT(key) DO UPDATE SET
                value_json = excluded.value_json,
                updated_at = excluded.updated_at
            """,
            (key, value_json, _utc_now()),
        )
        conn.commit()
    finally:
        conn.close()


def load(key: str, db_path: str | None = None) -> object | None:
    """Return the deserialized value stored under *key*, or None.

    None is returned when the key was never written and when the stored
    text is not valid JSON. The latter is logged, never raised.

    Args:
        key:     Snapshot key.
        db_path: Path to the SQLite file; defaults to tmp/app.db.
    """
    conn = connect(db_path)
    try:
        init_db(conn)
        row = conn.execute(
            "SELECT value_json FROM kv_store WHERE key = ?", (key,)
        ).fetchone()
    finally:
        conn.close()

    if row is None:
        return None

    try:
        return json.loads(row["value_json"])
    except (TypeError, ValueError):
        logger.warning("Discarding undecodable snapshot for key %r", key)
        return None


def delete(key: str, db_path: str | None = None) -> None:
    """Remove *key* from the store. Missing keys are ignored."""
    conn = connect(db_path)
    try:
        init_db(conn)
        conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        conn.commit()
    finally:
        conn.close()
