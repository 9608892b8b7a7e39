# ABOUTME: The `shelfkeeper book` command group for managing the catalog.
# ABOUTME: Provides add, ls, select, edit, rm, and info subcommands.

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from shelfkeeper.cli.options import db_option, library_session, not_blank, short_id
from shelfkeeper.core.errors import LibraryError, PersistenceError
from shelfkeeper.core.filters import ALL_PUBLISHERS
from shelfkeeper.core.types import BookDetails

console = Console()

CommandFn = Callable[..., Any]

# --clear names mapped to the optional BookDetails fields they empty.
CLEARABLE_FIELDS = {
    "publisher": "publisher",
    "year": "year",
    "language": "language",
    "pages": "page_count",
    "cover": "cover_image_url",
}


def _detail_options(required: bool) -> Callable[[CommandFn], CommandFn]:
    """Shared field options for `book add` and `book edit`."""

    def decorator(func: CommandFn) -> CommandFn:
        options = [
            click.option("--title", required=required, callback=not_blank, help="Book title."),
            click.option("--author", required=required, callback=not_blank, help="Author."),
            click.option("--publisher", default=None, help="Publisher."),
            click.option("--year", type=int, default=None, help="Publication year."),
            click.option("--language", default=None, help="Language."),
            click.option(
                "--pages",
                "page_count",
                type=click.IntRange(min=0),
                default=None,
                help="Number of pages.",
            ),
            click.option("--cover", "cover_image_url", default=None, help="Cover image URL."),
        ]
        for option in reversed(options):
            func = option(func)
        return func

    return decorator


@click.group("book")
def book() -> None:
    """Manage the book catalog."""


@book.command("add")
@_detail_options(required=True)
@db_option
def book_add(
    title: str,
    author: str,
    publisher: str | None,
    year: int | None,
    language: str | None,
    page_count: int | None,
    cover_image_url: str | None,
    db_path: Path | None,
) -> None:
    """Add a book to the catalog."""
    details = BookDetails(
        title=title,
        author=author,
        publisher=publisher,
        year=year,
        language=language,
        page_count=page_count,
        cover_image_url=cover_image_url,
    )
    try:
        with library_session(db_path) as library:
            record = library.add_book(details)
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    console.print(f"Added [bold]{record.title}[/bold] [dim]({short_id(record.id)})[/dim].")


@book.command("ls")
@db_option
@click.option("--publisher", "publisher_filter", default=None, help="Filter by publisher.")
@click.option("--available", "only_available", is_flag=True, help="Only books not on loan.")
@click.option("--loaned", "only_loaned", is_flag=True, help="Only books on loan.")
def book_ls(
    db_path: Path | None,
    publisher_filter: str | None,
    only_available: bool,
    only_loaned: bool,
) -> None:
    """List books in the catalog."""
    if only_available and only_loaned:
        raise click.UsageError("--available and --loaned are mutually exclusive.")

    try:
        with library_session(db_path) as library:
            if only_available:
                records = library.available_books()
            elif only_loaned:
                records = library.loaned_books()
            else:
                records = library.catalog()
            total = len(library.catalog())

            if publisher_filter and publisher_filter != ALL_PUBLISHERS:
                wanted = {b.id for b in library.books_by_publisher(publisher_filter)}
                records = [r for r in records if r.id in wanted]

            loaned = {r.id for r in records if library.is_loaned(r.id)}
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    if not records:
        if total == 0:
            console.print("[yellow]No books in the library.[/yellow]")
        elif publisher_filter:
            console.print("[yellow]No books found for this publisher.[/yellow]")
        else:
            console.print("[yellow]No matching books.[/yellow]")
        return

    table = Table()
    table.add_column("", width=1)
    table.add_column("ID", style="dim", width=8)
    table.add_column("Title", style="bold")
    table.add_column("Author")
    table.add_column("Publisher")
    table.add_column("Status")

    for record in records:
        table.add_row(
            "*" if record.selected else "",
            short_id(record.id),
            record.title,
            record.author,
            record.publisher or "",
            "[red]On Loan[/red]" if record.id in loaned else "",
        )

    console.print(table)
    console.print(f"\n[dim]{len(records)} book(s)[/dim]")


@book.command("select")
@click.argument("book_ref")
@db_option
def book_select(book_ref: str, db_path: Path | None) -> None:
    """Select a book by ID, or deselect it if it is already selected."""
    try:
        with library_session(db_path) as library:
            record = library.find_book(book_ref)
            library.toggle_select(record.id)
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    if record.selected:
        console.print(f"Selected [bold]{record.title}[/bold].")
    else:
        console.print(f"Deselected [bold]{record.title}[/bold].")


@book.command("edit")
@_detail_options(required=False)
@click.option(
    "--clear",
    "cleared",
    multiple=True,
    type=click.Choice(sorted(CLEARABLE_FIELDS)),
    help="Empty an optional field. Repeat to clear several.",
)
@db_option
def book_edit(
    title: str | None,
    author: str | None,
    publisher: str | None,
    year: int | None,
    language: str | None,
    page_count: int | None,
    cover_image_url: str | None,
    cleared: tuple[str, ...],
    db_path: Path | None,
) -> None:
    """Edit the selected book. Fields not given keep their current value."""
    changes = {
        "title": title,
        "author": author,
        "publisher": publisher,
        "year": year,
        "language": language,
        "page_count": page_count,
        "cover_image_url": cover_image_url,
    }
    changes = {key: value for key, value in changes.items() if value is not None}
    for name in cleared:
        field = CLEARABLE_FIELDS[name]
        if field in changes:
            raise click.UsageError(f"Can't set and clear {name} at once.")
        changes[field] = None

    try:
        with library_session(db_path) as library:
            current = library.begin_edit()
            if not changes:
                library.cancel_edit()
                console.print("[yellow]Nothing to change.[/yellow]")
                return
            library.update_book(replace(current.details, **changes))
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    console.print(f"Updated [bold]{current.title}[/bold].")


@book.command("rm")
@click.argument("book_ref", required=False)
@db_option
def book_rm(book_ref: str | None, db_path: Path | None) -> None:
    """Delete a book by ID, or the selected book. Books on loan are kept."""
    try:
        with library_session(db_path) as library:
            if book_ref is None:
                record = library.delete_selected()
            else:
                record = library.delete_book(library.find_book(book_ref).id)
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    console.print(f"Deleted [bold]{record.title}[/bold].")


@book.command("info")
@click.argument("book_ref")
@db_option
def book_info(book_ref: str, db_path: Path | None) -> None:
    """Show every field of a book and its loan status."""
    try:
        with library_session(db_path) as library:
            record = library.find_book(book_ref)
            loan = library.ledger.active_loan_for(record.id)
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    details = record.details
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value")

    table.add_row("ID", record.id)
    table.add_row("Title", details.title)
    table.add_row("Author", details.author)
    if details.publisher:
        table.add_row("Publisher", details.publisher)
    if details.year is not None:
        table.add_row("Year", str(details.year))
    if details.language:
        table.add_row("Language", details.language)
    if details.page_count is not None:
        table.add_row("Pages", str(details.page_count))
    if details.cover_image_url:
        table.add_row("Cover", details.cover_image_url)
    table.add_row("Selected", "yes" if record.selected else "no")
    if loan is None:
        table.add_row("Status", "available")
    else:
        table.add_row("Status", f"on loan to {loan.borrower_name}")
        table.add_row("Due", loan.due_at.date().isoformat())

    console.print(table)
