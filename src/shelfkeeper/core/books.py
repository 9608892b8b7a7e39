# ABOUTME: In-memory catalog of Book records for Shelfkeeper.
# ABOUTME: Keeps insertion order, an id index, and the single-selection flag.

from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from shelfkeeper.core.identity import new_book_id
from shelfkeeper.core.types import Book, BookDetails


class BookStore:
    """Owns the ordered catalog of books.

    Insertion order is the canonical display order. At most one book has
    its selected flag set at any time. The store does not know about loans;
    deletions must go through ConsistencyGuard.
    """

    def __init__(self, id_factory: Callable[[], str] = new_book_id) -> None:
        self._id_factory = id_factory
        self._books: list[Book] = []
        self._by_id: dict[str, Book] = {}

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(list(self._books))

    def __contains__(self, book_id: object) -> bool:
        return book_id in self._by_id

    def add(self, details: BookDetails) -> Book:
        """Append a new, unselected book with a fresh id."""
        book = Book(id=self._id_factory(), details=replace(details))
        self._books.append(book)
        self._by_id[book.id] = book
        return book

    def get(self, book_id: str) -> Book | None:
        return self._by_id.get(book_id)

    def all(self) -> list[Book]:
        """Return every book in catalog order."""
        return list(self._books)

    def toggle_select(self, book_id: str) -> Book | None:
        """Flip the target's selection and clear every other book's.

        Unknown ids are ignored and leave all flags untouched.
        """
        target = self._by_id.get(book_id)
        if target is None:
            return None

        new_state = not target.selected
        for book in self._books:
            book.selected = False
        target.selected = new_state
        return target

    def selected_book(self) -> Book | None:
        """Return the currently selected book, if any."""
        for book in self._books:
            if book.selected:
                return book
        return None

    def update(self, book_id: str, details: BookDetails) -> Book | None:
        """Replace a book's details in place and deselect it.

        The id and catalog position never change. Returns None for an
        unknown id.
        """
        book = self._by_id.get(book_id)
        if book is None:
            return None
        book.details = replace(details)
        book.selected = False
        return book

    def remove(self, book_id: str) -> Book | None:
        """Delete a book by id, returning it, or None if it was not present."""
        book = self._by_id.pop(book_id, None)
        if book is not None:
            self._books.remove(book)
        return book

    def load(self, books: Iterable[Book]) -> None:
        """Replace the catalog with previously persisted books.

        If the snapshot carries more than one selected book, only the first
        keeps its flag.
        """
        self._books = []
        self._by_id = {}
        seen_selected = False
        for book in books:
            if book.selected:
                if seen_selected:
                    book.selected = False
                seen_selected = True
            self._books.append(book)
            self._by_id[book.id] = book

    def snapshot(self) -> list[Book]:
        return list(self._books)
