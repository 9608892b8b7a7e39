# ABOUTME: SQLite connection management for the Shelfkeeper storage file.
# ABOUTME: Opens or creates the database and applies the schema on first use.

import sqlite3
from pathlib import Path

from shelfkeeper.db.schema import SCHEMA_V1

DEFAULT_DB_PATH = Path.home() / ".shelfkeeper" / "library.db"


def _schema_exists(conn: sqlite3.Connection) -> bool:
    """Check if the schema has already been applied."""
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='schema_version'"
    )
    return cursor.fetchone() is not None


def open_library(path: Path | None = None) -> sqlite3.Connection:
    """Open or create the Shelfkeeper storage database.

    Creates the database file and parent directories if they don't exist.
    Applies the schema on first creation. Sets WAL journal mode and
    sqlite3.Row factory for dict-like column access.

    Args:
        path: Path to the database file. Defaults to ~/.shelfkeeper/library.db.

    Returns:
        A configured sqlite3.Connection.
    """
    db_path = path or DEFAULT_DB_PATH
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")

    if not _schema_exists(conn):
        conn.executescript(SCHEMA_V1)

    return conn
