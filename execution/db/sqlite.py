"""
execution/db/sqlite.py

SQLite helper module for local persistence of academy state snapshots.
Provides only infrastructure: path resolution, connection setup, and schema initialization.
No business logic lives here.
"""

import os
import sqlite3
from pathlib import Path

# Overrides the default tmp/app.db location when set.
DB_PATH_ENV_VAR = "DGA_DB_PATH"


def get_db_path() -> str:
    """Return the absolute path to the local SQLite database file.

    Honours the DGA_DB_PATH environment variable when set. Otherwise the file
    lives under the repo's /tmp folder (which is safe to delete and is never
    committed). Creates the parent directory if it does not exist.

    Returns:
        str: Absolute path to the database file.
    """
    override = os.environ.get(DB_PATH_ENV_VAR, "").strip()
    if override:
        db_file = Path(override).expanduser().resolve()
    else:
        repo_root = Path(__file__).resolve().parents[2]  # execution/db/sqlite.py -> repo root
        db_file = repo_root / "tmp" / "app.db"
    db_file.parent.mkdir(parents=True, exist_ok=True)
    return str(db_file)


def connect(db_path: str | None = None) -> sqlite3.Connection:
    """Open and return a sqlite3 connection with rows accessible by column name.

    Args:
        db_path: Path to the SQLite file. Defaults to the result of get_db_path().

    Returns:
        sqlite3.Connection: An open connection.
    """
    if db_path is None:
        db_path = get_db_path()
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_db(conn: sqlite3.Connection) -> None:
    """Create the key/value snapshot table if it does not already exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    Does not drop or migrate existing tables.

    Schema:
        kv_store  one serialized JSON snapshot per key
                    (user identity, module catalog, course progress)

    Args:
        conn: An open sqlite3.Connection.
    """
    conn.executescript("""
        CREATE TABLE IF NOT EXISTS kv_store (
            key         TEXT PRIMARY KEY,
            value_json  TEXT NOT NULL,
            updated_at  TEXT NOT NULL
        );
    """)
    conn.commit()
