# ABOUTME: The ledger of active loans in Shelfkeeper.
# ABOUTME: Validates loan requests against the catalog and computes due dates.

import logging
from collections.abc import Callable, Iterable
from datetime import datetime

from shelfkeeper.core.errors import (
    AlreadyLoanedError,
    InvalidDurationError,
    InvalidReferenceError,
    NotOnLoanError,
)
from shelfkeeper.core.identity import IdentityResolver
from shelfkeeper.core.scheduler import MAX_LOAN_WEEKS, MIN_LOAN_WEEKS, compute_due_date
from shelfkeeper.core.types import Loan

logger = logging.getLogger(__name__)


class LoanLedger:
    """Owns the list of active loans, kept in creation order.

    Each loan references a book by id. A book has at most one active loan.
    """

    def __init__(
        self,
        identity: IdentityResolver,
        *,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._identity = identity
        self._clock = clock
        self._loans: list[Loan] = []

    def __len__(self) -> int:
        return len(self._loans)

    def create(self, book_id: str, borrower_name: str, duration_weeks: int) -> Loan:
        """Record a new loan and return it.

        Args:
            book_id: Id of the book being lent.
            borrower_name: Who is borrowing it.
            duration_weeks: Loan period, a whole number of weeks from 1 to 4.

        Returns:
            The stored Loan, with due_at already computed.

        Raises:
            InvalidReferenceError: If book_id is not in the catalog.
            AlreadyLoanedError: If the book already has an active loan.
            InvalidDurationError: If duration_weeks is out of range or not an int.
        """
        book = self._identity.resolve(book_id)
        if book is None:
            raise InvalidReferenceError(f"Book {book_id} not found")

        if self.active_loan_for(book_id) is not None:
            raise AlreadyLoanedError(f"'{book.title}' is already on loan")

        # bool is an int subclass but never a meaningful week count
        if (
            isinstance(duration_weeks, bool)
            or not isinstance(duration_weeks, int)
            or not MIN_LOAN_WEEKS <= duration_weeks <= MAX_LOAN_WEEKS
        ):
            raise InvalidDurationError(
                f"Loan period must be {MIN_LOAN_WEEKS}-{MAX_LOAN_WEEKS} weeks, "
                f"got {duration_weeks!r}"
            )

        started_at = self._clock()
        loan = Loan(
            book_id=book_id,
            borrower_name=borrower_name,
            duration_weeks=duration_weeks,
            started_at=started_at,
            due_at=compute_due_date(started_at, duration_weeks),
        )
        self._loans.append(loan)
        logger.debug("Lent %s to %s until %s", book_id, borrower_name, loan.due_at)
        return loan

    def active_loan_for(self, book_id: str) -> Loan | None:
        for loan in self._loans:
            if loan.book_id == book_id:
                return loan
        return None

    def all(self) -> list[Loan]:
        """Return active loans in creation order."""
        return list(self._loans)

    def discharge(self, book_id: str) -> Loan:
        """End the active loan for a book and return it.

        Raises:
            NotOnLoanError: If the book has no active loan.
        """
        loan = self.active_loan_for(book_id)
        if loan is None:
            raise NotOnLoanError(f"Book {book_id} is not on loan")
        self._loans.remove(loan)
        return loan

    def load(self, loans: Iterable[Loan]) -> None:
        """Replace the ledger with previously persisted loans.

        A later loan for a book that already appeared is dropped with a
        warning, so the one-loan-per-book rule holds after loading.
        """
        self._loans = []
        for loan in loans:
            if self.active_loan_for(loan.book_id) is not None:
                logger.warning("Ignoring duplicate stored loan for book %s", loan.book_id)
                continue
            self._loans.append(loan)

    def snapshot(self) -> list[Loan]:
        return list(self._loans)
