# ABOUTME: Unit tests for ConsistencyGuard.
# ABOUTME: Loaned books can't be deleted but can always be edited.

import pytest

from shelfkeeper.core.availability import AvailabilityResolver
from shelfkeeper.core.books import BookStore
from shelfkeeper.core.errors import BookOnLoanError, InvalidReferenceError
from shelfkeeper.core.guard import ConsistencyGuard
from shelfkeeper.core.identity import IdentityResolver
from shelfkeeper.core.loans import LoanLedger
from shelfkeeper.core.types import BookDetails


@pytest.fixture()
def store() -> BookStore:
    return BookStore()


@pytest.fixture()
def ledger(store: BookStore) -> LoanLedger:
    return LoanLedger(IdentityResolver(store))


@pytest.fixture()
def guard(store: BookStore, ledger: LoanLedger) -> ConsistencyGuard:
    return ConsistencyGuard(store, AvailabilityResolver(store, ledger))


class TestRequestDelete:
    """Tests for can_delete and request_delete."""

    def test_deletes_available_book(
        self, guard: ConsistencyGuard, store: BookStore, rose: BookDetails
    ) -> None:
        book = store.add(rose)
        assert guard.can_delete(book.id)
        assert guard.request_delete(book.id) is book
        assert store.get(book.id) is None

    def test_refuses_loaned_book(
        self,
        guard: ConsistencyGuard,
        store: BookStore,
        ledger: LoanLedger,
        rose: BookDetails,
    ) -> None:
        """Deleting a loaned book fails and leaves catalog and ledger untouched."""
        book = store.add(rose)
        loan = ledger.create(book.id, "Alice", 1)

        assert not guard.can_delete(book.id)
        with pytest.raises(BookOnLoanError, match="The Name of the Rose"):
            guard.request_delete(book.id)

        assert store.get(book.id) is book
        assert ledger.all() == [loan]

    def test_deletable_after_return(
        self,
        guard: ConsistencyGuard,
        store: BookStore,
        ledger: LoanLedger,
        rose: BookDetails,
    ) -> None:
        book = store.add(rose)
        ledger.create(book.id, "Alice", 1)
        ledger.discharge(book.id)
        guard.request_delete(book.id)
        assert len(store) == 0

    def test_unknown_book(self, guard: ConsistencyGuard) -> None:
        with pytest.raises(InvalidReferenceError):
            guard.request_delete("missing")

    def test_on_loan_iff_delete_refused(
        self,
        guard: ConsistencyGuard,
        store: BookStore,
        ledger: LoanLedger,
        rose: BookDetails,
        dune: BookDetails,
        emma: BookDetails,
    ) -> None:
        books = [store.add(rose), store.add(dune), store.add(emma)]
        ledger.create(books[1].id, "Alice", 1)
        availability = AvailabilityResolver(store, ledger)

        for book in books:
            loaned = availability.is_loaned(book.id)
            try:
                guard.request_delete(book.id)
                refused = False
            except BookOnLoanError:
                refused = True
            assert loaned == refused


class TestCanEdit:
    """Tests for can_edit."""

    def test_loaned_book_is_editable(
        self,
        guard: ConsistencyGuard,
        store: BookStore,
        ledger: LoanLedger,
        rose: BookDetails,
    ) -> None:
        book = store.add(rose)
        ledger.create(book.id, "Alice", 1)
        assert guard.can_edit(book.id) is True
