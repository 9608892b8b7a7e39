# ABOUTME: SQLite-backed snapshot store for Shelfkeeper collections.
# ABOUTME: Saves and loads each named collection as one JSON document.

import json
import logging
import sqlite3
from typing import Any

from shelfkeeper.core.errors import PersistenceError

logger = logging.getLogger(__name__)


class SqliteSnapshotStore:
    """Wraps a sqlite3 connection and round-trips named JSON snapshots.

    Implements the SnapshotGateway protocol. Each save commits immediately.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def load(self, name: str) -> list[dict[str, Any]]:
        """Return the stored snapshot for a collection, or [] if there is none.

        Raises:
            PersistenceError: If the database can't be read or the payload
                is not a JSON array.
        """
        try:
            cursor = self._conn.execute(
                "SELECT payload FROM collections WHERE name = ?", (name,)
            )
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            raise PersistenceError(f"Could not read '{name}': {exc}") from exc

        if row is None:
            return []

        try:
            items = json.loads(row["payload"])
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Stored '{name}' is not valid JSON: {exc}") from exc

        if not isinstance(items, list):
            raise PersistenceError(f"Stored '{name}' is not a list")
        return items

    def save(self, name: str, items: list[dict[str, Any]]) -> None:
        """Replace the stored snapshot for a collection.

        Raises:
            PersistenceError: If the write fails. Nothing is committed then.
        """
        payload = json.dumps(items)
        try:
            with self._conn:
                self._conn.execute(
                    "INSERT INTO collections (name, payload) VALUES (?, ?) "
                    "ON CONFLICT(name) DO UPDATE SET payload = excluded.payload, "
                    "date_modified = strftime('%Y-%m-%dT%H:%M:%S', 'now')",
                    (name, payload),
                )
        except sqlite3.Error as exc:
            logger.error("Failed to save %s: %s", name, exc)
            raise PersistenceError(f"Could not save '{name}': {exc}") from exc

        logger.debug("Saved %d %s record(s)", len(items), name)
