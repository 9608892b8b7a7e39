# ABOUTME: Loan-aware checks applied before the catalog is mutated.
# ABOUTME: Blocks deleting books that are on loan; editing is always allowed.

import logging

from shelfkeeper.core.availability import AvailabilityResolver
from shelfkeeper.core.books import BookStore
from shelfkeeper.core.errors import BookOnLoanError, InvalidReferenceError
from shelfkeeper.core.types import Book

logger = logging.getLogger(__name__)


class ConsistencyGuard:
    """Validates book mutations against the loan ledger.

    Checks run before BookStore is touched, so a rejected request leaves
    both the catalog and the ledger exactly as they were.
    """

    def __init__(self, books: BookStore, availability: AvailabilityResolver) -> None:
        self._books = books
        self._availability = availability

    def can_delete(self, book_id: str) -> bool:
        return not self._availability.is_loaned(book_id)

    def can_edit(self, book_id: str) -> bool:
        # Loaned books may be edited; only deletion is blocked.
        return True

    def request_delete(self, book_id: str) -> Book:
        """Delete a book if it has no active loan.

        Raises:
            BookOnLoanError: If the book is currently on loan.
            InvalidReferenceError: If the book is not in the catalog.
        """
        if not self.can_delete(book_id):
            book = self._books.get(book_id)
            title = book.title if book is not None else book_id
            logger.info("Refused to delete %s: on loan", book_id)
            raise BookOnLoanError(f"'{title}' is currently on loan and cannot be deleted")

        removed = self._books.remove(book_id)
        if removed is None:
            raise InvalidReferenceError(f"Book {book_id} not found")
        return removed
