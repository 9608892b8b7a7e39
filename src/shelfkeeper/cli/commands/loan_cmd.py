# ABOUTME: The `shelfkeeper loan` command group for lending books.
# ABOUTME: Provides add, ls, and return subcommands over the loan ledger.

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from shelfkeeper.cli.options import db_option, library_session, not_blank, short_id
from shelfkeeper.core.errors import LibraryError, PersistenceError

console = Console()


@click.group("loan")
def loan() -> None:
    """Lend books and track who has them."""


@loan.command("add")
@click.argument("book_ref")
@click.option("--borrower", required=True, callback=not_blank, help="Who is borrowing the book.")
@click.option("--weeks", type=int, default=1, show_default=True, help="Loan period (1-4 weeks).")
@db_option
def loan_add(book_ref: str, borrower: str, weeks: int, db_path: Path | None) -> None:
    """Lend a book to a borrower."""
    try:
        with library_session(db_path) as library:
            record = library.find_book(book_ref)
            new_loan = library.create_loan(record.id, borrower, weeks)
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    console.print(
        f"Lent [bold]{record.title}[/bold] to [cyan]{new_loan.borrower_name}[/cyan], "
        f"due {new_loan.due_at.date().isoformat()}."
    )


@loan.command("ls")
@db_option
def loan_ls(db_path: Path | None) -> None:
    """List books currently on loan, oldest first."""
    try:
        with library_session(db_path) as library:
            loans = library.loans()
            titles: dict[str, str | None] = {}
            for active in loans:
                record = library.books.get(active.book_id)
                titles[active.book_id] = record.title if record else None
            available = len(library.available_books())
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    if not loans:
        console.print("[yellow]No books are currently loaned.[/yellow]")
        return

    table = Table()
    table.add_column("Borrower", style="bold")
    table.add_column("Book")
    table.add_column("ID", style="dim", width=8)
    table.add_column("Period", justify="right")
    table.add_column("Due")

    for active in loans:
        table.add_row(
            active.borrower_name,
            titles[active.book_id] or "[dim]missing[/dim]",
            short_id(active.book_id),
            f"{active.duration_weeks} week(s)",
            active.due_at.date().isoformat(),
        )

    console.print(table)
    if available == 0:
        console.print("\n[dim]Nothing can be loaned.[/dim]")
    else:
        console.print(f"\n[dim]{len(loans)} on loan, {available} available[/dim]")


@loan.command("return")
@click.argument("book_ref")
@db_option
def loan_return(book_ref: str, db_path: Path | None) -> None:
    """Mark a loaned book as returned."""
    try:
        with library_session(db_path) as library:
            record = library.find_book(book_ref)
            ended = library.return_loan(record.id)
    except LibraryError as exc:
        console.print(f"[red]{exc}[/red]")
        raise SystemExit(1) from exc
    except PersistenceError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise SystemExit(2) from exc

    console.print(
        f"[bold]{record.title}[/bold] returned by [cyan]{ended.borrower_name}[/cyan]."
    )
