# ABOUTME: The `shelfkeeper publishers` command.
# ABOUTME: Lists the publisher filter choices, with "All" first.

from pathlib import Path

import click
from rich.console import Console

from shelfkeeper.cli.options import db_option, library_session
from shelfkeeper.core.errors import PersistenceError

console = Console()


@click.command("publishers")
@db_option
def publishers(db_path: Path | None) -> None:
    """List the publishers that `book ls --publisher` can filter by."""
    try:
        with library_session(db_path) as library:
            choices = library.publishers()
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    for name in choices:
        console.print(name, markup=False)
