# ABOUTME: The Library facade that wires catalog, ledger, and guard together.
# ABOUTME: Implements the selection/edit protocol and write-through persistence.

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from typing import Any, TypeVar

from shelfkeeper.core.availability import AvailabilityResolver
from shelfkeeper.core.books import BookStore
from shelfkeeper.core.errors import InvalidReferenceError, NoSelectionError, PersistenceError
from shelfkeeper.core.filters import filter_by_publisher, publisher_choices
from shelfkeeper.core.gateway import BOOKS_COLLECTION, LOANS_COLLECTION, SnapshotGateway
from shelfkeeper.core.guard import ConsistencyGuard
from shelfkeeper.core.identity import IdentityResolver, new_book_id
from shelfkeeper.core.loans import LoanLedger
from shelfkeeper.core.types import Book, BookDetails, Loan
from shelfkeeper.db.mapping import book_to_row, loan_to_row, row_to_book, row_to_loan

logger = logging.getLogger(__name__)

_Record = TypeVar("_Record")


def _read_collection(
    gateway: SnapshotGateway, name: str, convert: Callable[[dict[str, Any]], _Record]
) -> list[_Record]:
    """Load a collection and map each stored row to a record.

    Raises:
        PersistenceError: If the gateway fails or a row can't be mapped.
    """
    rows = gateway.load(name)
    try:
        return [convert(row) for row in rows]
    except (KeyError, TypeError, ValueError) as exc:
        raise PersistenceError(f"Stored '{name}' is malformed: {exc!r}") from exc


class Library:
    """A catalog of books and the loans made of them.

    Every successful mutation saves the affected collection through the
    gateway before returning. Rejected requests raise a LibraryError and
    save nothing. If a save fails, the in-memory change is undone and the
    gateway's PersistenceError propagates, so memory never runs ahead of
    storage.
    """

    def __init__(
        self,
        gateway: SnapshotGateway,
        *,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = new_book_id,
    ) -> None:
        self._gateway = gateway
        self.books = BookStore(id_factory=id_factory)
        self.identity = IdentityResolver(self.books)
        self.ledger = LoanLedger(self.identity, clock=clock)
        self.availability = AvailabilityResolver(self.books, self.ledger)
        self.guard = ConsistencyGuard(self.books, self.availability)
        self._editing_id: str | None = None

    @classmethod
    def load(
        cls,
        gateway: SnapshotGateway,
        *,
        clock: Callable[[], datetime] = datetime.now,
        id_factory: Callable[[], str] = new_book_id,
    ) -> "Library":
        """Build a Library from the snapshots held by a gateway."""
        library = cls(gateway, clock=clock, id_factory=id_factory)
        library.books.load(_read_collection(gateway, BOOKS_COLLECTION, row_to_book))
        library.ledger.load(_read_collection(gateway, LOANS_COLLECTION, row_to_loan))

        for loan in library.ledger.all():
            if loan.book_id not in library.books:
                logger.warning(
                    "Loan to %s references missing book %s",
                    loan.borrower_name,
                    loan.book_id,
                )
        return library

    # --- Book actions ---

    def add_book(self, details: BookDetails) -> Book:
        with self._books_change():
            book = self.books.add(details)
        logger.debug("Added book %s (%s)", book.id, book.title)
        return book

    def toggle_select(self, book_id: str) -> Book | None:
        """Toggle a book's selection. Unknown ids are ignored."""
        if book_id not in self.books:
            return None
        with self._books_change():
            book = self.books.toggle_select(book_id)
        return book

    def selected_book(self) -> Book | None:
        return self.books.selected_book()

    def begin_edit(self) -> Book:
        """Start editing the selected book and return it.

        Raises:
            NoSelectionError: If no book is selected.
        """
        book = self.books.selected_book()
        if book is None:
            raise NoSelectionError("Select a book to edit first")
        self._editing_id = book.id
        return book

    def cancel_edit(self) -> None:
        self._editing_id = None

    @property
    def editing_book(self) -> Book | None:
        if self._editing_id is None:
            return None
        return self.books.get(self._editing_id)

    def update_book(self, details: BookDetails) -> Book | None:
        """Apply an edit to the book passed to begin_edit.

        Does nothing and returns None when no edit is in progress. The
        edited book ends up deselected. If the save fails, the edit stays
        in progress so it can be retried.
        """
        book_id = self._editing_id
        if book_id is None:
            return None
        if book_id not in self.books or not self.guard.can_edit(book_id):
            self._editing_id = None
            return None

        with self._books_change():
            self._editing_id = None
            book = self.books.update(book_id, details)
        logger.debug("Updated book %s", book_id)
        return book

    def delete_selected(self) -> Book:
        """Delete the selected book.

        Raises:
            NoSelectionError: If no book is selected.
            BookOnLoanError: If the selected book is on loan.
        """
        book = self.books.selected_book()
        if book is None:
            raise NoSelectionError("Select a book to delete first")
        return self.delete_book(book.id)

    def delete_book(self, book_id: str) -> Book:
        """Delete a book that is not on loan.

        Raises:
            BookOnLoanError: If the book is on loan.
            InvalidReferenceError: If the book is not in the catalog.
        """
        with self._books_change():
            removed = self.guard.request_delete(book_id)
            if self._editing_id == book_id:
                self._editing_id = None
        logger.debug("Deleted book %s (%s)", removed.id, removed.title)
        return removed

    # --- Loan actions ---

    def create_loan(self, book_id: str, borrower_name: str, duration_weeks: int) -> Loan:
        """Lend a book. See LoanLedger.create for the rejection rules."""
        with self._loans_change():
            loan = self.ledger.create(book_id, borrower_name, duration_weeks)
        return loan

    def return_loan(self, book_id: str) -> Loan:
        """End the active loan of a book, making it available again."""
        with self._loans_change():
            loan = self.ledger.discharge(book_id)
        logger.debug("Returned book %s from %s", book_id, loan.borrower_name)
        return loan

    # --- Read-side views ---

    def catalog(self) -> list[Book]:
        return self.books.all()

    def find_book(self, ref: str) -> Book:
        """Resolve a full id or unique id prefix to a book.

        Raises:
            InvalidReferenceError: If nothing, or more than one book, matches.
        """
        book = self.identity.resolve_prefix(ref)
        if book is None:
            raise InvalidReferenceError(f"Book {ref} not found")
        return book

    def is_loaned(self, book_id: str) -> bool:
        return self.availability.is_loaned(book_id)

    def available_books(self) -> list[Book]:
        return self.availability.available_books()

    def loaned_books(self) -> list[Book]:
        return self.availability.loaned_books()

    def loans(self) -> list[Loan]:
        return self.ledger.all()

    def publishers(self) -> list[str]:
        return publisher_choices(self.books.all())

    def books_by_publisher(self, publisher: str) -> list[Book]:
        return filter_by_publisher(self.books.all(), publisher)

    # --- Persistence ---

    def _save_books(self) -> None:
        rows = [book_to_row(book) for book in self.books.snapshot()]
        self._gateway.save(BOOKS_COLLECTION, rows)

    def _save_loans(self) -> None:
        rows = [loan_to_row(loan) for loan in self.ledger.snapshot()]
        self._gateway.save(LOANS_COLLECTION, rows)

    @contextmanager
    def _books_change(self) -> Iterator[None]:
        """Run a catalog mutation, then save it or undo it.

        Books are restored in place, so Book objects the caller already
        holds keep matching the catalog after a failed save.
        """
        saved = [(book, book.details, book.selected) for book in self.books.snapshot()]
        editing_id = self._editing_id
        yield
        try:
            self._save_books()
        except PersistenceError:
            for book, details, selected in saved:
                book.details = details
                book.selected = selected
            self.books.load(book for book, _, _ in saved)
            self._editing_id = editing_id
            logger.error("Catalog change undone: save failed")
            raise

    @contextmanager
    def _loans_change(self) -> Iterator[None]:
        """Run a ledger mutation, then save it or undo it."""
        saved = self.ledger.snapshot()
        yield
        try:
            self._save_loans()
        except PersistenceError:
            self.ledger.load(saved)
            logger.error("Loan change undone: save failed")
            raise
