# ABOUTME: Core record types for the Shelfkeeper catalog and loan ledger.
# ABOUTME: BookDetails is the editable payload; Book and Loan are the stored records.

from dataclasses import dataclass
from datetime import datetime


@dataclass
class BookDetails:
    """The user-editable fields of a book.

    This is what add and edit requests carry. Only title and author are
    expected to be filled in; everything else is stored as given.
    """

    title: str
    author: str
    publisher: str | None = None
    year: int | None = None
    language: str | None = None
    page_count: int | None = None
    cover_image_url: str | None = None


@dataclass
class Book:
    """A cataloged book: its details plus identity and selection state."""

    id: str
    details: BookDetails
    selected: bool = False

    @property
    def title(self) -> str:
        return self.details.title

    @property
    def author(self) -> str:
        return self.details.author

    @property
    def publisher(self) -> str | None:
        return self.details.publisher


@dataclass(frozen=True)
class Loan:
    """An active loan of one book to one borrower.

    due_at is computed once when the loan is created and stored as-is.
    """

    book_id: str
    borrower_name: str
    duration_weeks: int
    started_at: datetime
    due_at: datetime
