# ABOUTME: Public API for the Shelfkeeper storage layer.
# ABOUTME: Exports connection management, the SQLite snapshot store, and record mapping.

from shelfkeeper.db.connection import DEFAULT_DB_PATH, open_library
from shelfkeeper.db.mapping import book_to_row, loan_to_row, row_to_book, row_to_loan
from shelfkeeper.db.store import SqliteSnapshotStore

__all__ = [
    "DEFAULT_DB_PATH",
    "SqliteSnapshotStore",
    "book_to_row",
    "loan_to_row",
    "open_library",
    "row_to_book",
    "row_to_loan",
]
