# ABOUTME: Unit tests for BookStore catalog operations.
# ABOUTME: Validates add, selection toggling, update, remove, and snapshot loading.

import pytest

from shelfkeeper.core.books import BookStore
from shelfkeeper.core.types import Book, BookDetails


@pytest.fixture()
def store() -> BookStore:
    return BookStore()


class TestAdd:
    """Tests for BookStore.add."""

    def test_appends_in_insertion_order(
        self, store: BookStore, rose: BookDetails, dune: BookDetails
    ) -> None:
        """Books are listed in the order they were added."""
        first = store.add(rose)
        second = store.add(dune)
        assert store.all() == [first, second]

    def test_assigns_distinct_ids(self, store: BookStore, rose: BookDetails) -> None:
        """Each added book gets its own id, even with identical details."""
        a = store.add(rose)
        b = store.add(rose)
        assert a.id != b.id

    def test_new_book_is_unselected(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        assert book.selected is False

    def test_copies_details(self, store: BookStore, rose: BookDetails) -> None:
        """Later changes to the caller's BookDetails don't leak into the catalog."""
        book = store.add(rose)
        rose.title = "Changed"
        assert book.title == "The Name of the Rose"

    def test_stores_optional_fields_as_given(self, store: BookStore) -> None:
        """Optional fields are not validated."""
        book = store.add(BookDetails(title="Odd", author="Someone", year=-5, page_count=None))
        assert book.details.year == -5
        assert book.details.page_count is None

    def test_uses_id_factory(self, rose: BookDetails) -> None:
        store = BookStore(id_factory=lambda: "fixed-id")
        assert store.add(rose).id == "fixed-id"
        assert "fixed-id" in store


class TestToggleSelect:
    """Tests for BookStore.toggle_select and selected_book."""

    def test_selects_unselected_book(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        store.toggle_select(book.id)
        assert book.selected is True
        assert store.selected_book() is book

    def test_second_toggle_deselects(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        store.toggle_select(book.id)
        store.toggle_select(book.id)
        assert book.selected is False
        assert store.selected_book() is None

    def test_selecting_another_clears_previous(
        self, store: BookStore, rose: BookDetails, dune: BookDetails
    ) -> None:
        """Selection moves; it never accumulates."""
        a = store.add(rose)
        b = store.add(dune)
        store.toggle_select(a.id)
        store.toggle_select(b.id)
        assert a.selected is False
        assert b.selected is True

    def test_unknown_id_is_ignored(self, store: BookStore, rose: BookDetails) -> None:
        """An unknown id leaves the current selection in place."""
        book = store.add(rose)
        store.toggle_select(book.id)
        assert store.toggle_select("no-such-id") is None
        assert store.selected_book() is book

    def test_at_most_one_selected_after_any_sequence(
        self, store: BookStore, rose: BookDetails, dune: BookDetails, emma: BookDetails
    ) -> None:
        books = [store.add(rose), store.add(dune), store.add(emma)]
        sequence = [0, 1, 1, 2, 0, 0, 2, 1, 2, 2, 0]
        for index in sequence:
            store.toggle_select(books[index].id)
            assert sum(b.selected for b in store.all()) <= 1

    def test_no_selection_on_empty_store(self, store: BookStore) -> None:
        assert store.selected_book() is None


class TestUpdate:
    """Tests for BookStore.update."""

    def test_replaces_details(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        store.update(book.id, BookDetails(title="Il nome della rosa", author="Eco"))
        assert book.title == "Il nome della rosa"
        assert book.author == "Eco"
        assert book.publisher is None

    def test_keeps_id_and_position(
        self, store: BookStore, rose: BookDetails, dune: BookDetails
    ) -> None:
        a = store.add(rose)
        b = store.add(dune)
        store.update(a.id, BookDetails(title="Renamed", author="Eco"))
        assert [book.id for book in store.all()] == [a.id, b.id]

    def test_resets_selection(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        store.toggle_select(book.id)
        store.update(book.id, rose)
        assert book.selected is False

    def test_unknown_id_returns_none(self, store: BookStore, rose: BookDetails) -> None:
        store.add(rose)
        assert store.update("missing", rose) is None


class TestRemove:
    """Tests for BookStore.remove."""

    def test_removes_book(self, store: BookStore, rose: BookDetails) -> None:
        book = store.add(rose)
        assert store.remove(book.id) is book
        assert store.get(book.id) is None
        assert len(store) == 0

    def test_remove_unknown_returns_none(self, store: BookStore) -> None:
        assert store.remove("missing") is None


class TestLoad:
    """Tests for BookStore.load and snapshot."""

    def test_load_replaces_contents(self, store: BookStore, rose: BookDetails) -> None:
        store.add(rose)
        stored = [Book(id="a", details=rose), Book(id="b", details=rose)]
        store.load(stored)
        assert [book.id for book in store.all()] == ["a", "b"]
        assert store.get("b") is stored[1]

    def test_load_keeps_only_first_selected(self, store: BookStore, rose: BookDetails) -> None:
        store.load([
            Book(id="a", details=rose, selected=True),
            Book(id="b", details=rose, selected=True),
        ])
        assert store.selected_book() is not None
        assert store.selected_book().id == "a"
        assert store.get("b").selected is False

    def test_snapshot_is_a_copy(self, store: BookStore, rose: BookDetails) -> None:
        store.add(rose)
        snapshot = store.snapshot()
        snapshot.clear()
        assert len(store) == 1
