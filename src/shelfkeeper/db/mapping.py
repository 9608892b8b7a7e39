# ABOUTME: Converts Book and Loan records to and from JSON-ready dicts.
# ABOUTME: Timestamps are stored as ISO-8601 strings.

from datetime import datetime
from typing import Any

from shelfkeeper.core.types import Book, BookDetails, Loan


def book_to_row(book: Book) -> dict[str, Any]:
    """Convert a Book to a dict, including its selection flag."""
    details = book.details
    return {
        "id": book.id,
        "title": details.title,
        "author": details.author,
        "publisher": details.publisher,
        "year": details.year,
        "language": details.language,
        "page_count": details.page_count,
        "cover_image_url": details.cover_image_url,
        "selected": book.selected,
    }


def row_to_book(row: dict[str, Any]) -> Book:
    """Convert a stored dict back to a Book. Missing optional keys become None."""
    return Book(
        id=row["id"],
        details=BookDetails(
            title=row["title"],
            author=row["author"],
            publisher=row.get("publisher"),
            year=row.get("year"),
            language=row.get("language"),
            page_count=row.get("page_count"),
            cover_image_url=row.get("cover_image_url"),
        ),
        selected=bool(row.get("selected", False)),
    )


def loan_to_row(loan: Loan) -> dict[str, Any]:
    return {
        "book_id": loan.book_id,
        "borrower_name": loan.borrower_name,
        "duration_weeks": loan.duration_weeks,
        "started_at": loan.started_at.isoformat(),
        "due_at": loan.due_at.isoformat(),
    }


def row_to_loan(row: dict[str, Any]) -> Loan:
    return Loan(
        book_id=row["book_id"],
        borrower_name=row["borrower_name"],
        duration_weeks=row["duration_weeks"],
        started_at=datetime.fromisoformat(row["started_at"]),
        due_at=datetime.fromisoformat(row["due_at"]),
    )
