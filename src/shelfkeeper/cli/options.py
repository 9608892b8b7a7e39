# ABOUTME: Shared Click options and session helpers for Shelfkeeper CLI commands.
# ABOUTME: Provides the --db flag and a context manager that loads the Library.

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from shelfkeeper.core.errors import PersistenceError
from shelfkeeper.core.library import Library
from shelfkeeper.db.connection import DEFAULT_DB_PATH, open_library
from shelfkeeper.db.store import SqliteSnapshotStore

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="SHELFKEEPER_DB",
    help=f"Path to library database (default: {DEFAULT_DB_PATH}).",
)


def short_id(book_id: str) -> str:
    """Leading part of a book id, enough to type back on the command line."""
    return book_id[:8]


def not_blank(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Click callback rejecting values that are empty after trimming."""
    if value is not None and not value.strip():
        raise click.BadParameter("must not be blank")
    return value.strip() if value is not None else None


@contextmanager
def library_session(db_path: Path | None) -> Iterator[Library]:
    """Load the Library from the database and close the connection afterwards."""
    path = db_path or DEFAULT_DB_PATH
    try:
        conn = open_library(path)
    except sqlite3.Error as exc:
        raise PersistenceError(f"Could not open {path}: {exc}") from exc

    try:
        yield Library.load(SqliteSnapshotStore(conn))
    finally:
        conn.close()
