# ABOUTME: Derived availability views joining the catalog and the loan ledger.
# ABOUTME: Recomputed on every call; no copy of loan state is kept here.

from shelfkeeper.core.books import BookStore
from shelfkeeper.core.loans import LoanLedger
from shelfkeeper.core.types import Book


class AvailabilityResolver:
    """Answers which books are on loan and which are free to lend."""

    def __init__(self, books: BookStore, loans: LoanLedger) -> None:
        self._books = books
        self._loans = loans

    def is_loaned(self, book_id: str) -> bool:
        return self._loans.active_loan_for(book_id) is not None

    def available_books(self) -> list[Book]:
        """Books with no active loan, in catalog order."""
        loaned = self._loaned_ids()
        return [book for book in self._books.all() if book.id not in loaned]

    def loaned_books(self) -> list[Book]:
        """Books with an active loan, in catalog order."""
        loaned = self._loaned_ids()
        return [book for book in self._books.all() if book.id in loaned]

    def _loaned_ids(self) -> set[str]:
        return {loan.book_id for loan in self._loans.all()}
