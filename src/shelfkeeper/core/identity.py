# ABOUTME: Stable identifiers for cataloged books.
# ABOUTME: Issues UUID-based ids and resolves them without relying on catalog position.

import uuid
from typing import TYPE_CHECKING

from shelfkeeper.core.types import Book

if TYPE_CHECKING:
    from shelfkeeper.core.books import BookStore


def new_book_id() -> str:
    """Return a fresh identifier for a new book (32 hex characters)."""
    return uuid.uuid4().hex


class IdentityResolver:
    """Maps books to their ids and ids back to books.

    Loans refer to books through these ids, so the reference stays valid
    however the catalog is later reordered, filtered, or trimmed.
    """

    def __init__(self, store: "BookStore") -> None:
        self._store = store

    def id_of(self, book: Book) -> str:
        return book.id

    def resolve(self, book_id: str) -> Book | None:
        """Look up a book by its exact id."""
        return self._store.get(book_id)

    def resolve_prefix(self, prefix: str) -> Book | None:
        """Look up a book by a unique leading part of its id.

        An exact match always wins. Returns None when the prefix is empty,
        matches nothing, or matches more than one book.
        """
        prefix = prefix.strip().lower()
        if not prefix:
            return None

        exact = self.resolve(prefix)
        if exact is not None:
            return exact

        matches = [book for book in self._store if book.id.startswith(prefix)]
        return matches[0] if len(matches) == 1 else None
