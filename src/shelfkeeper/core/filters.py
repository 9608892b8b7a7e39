# ABOUTME: Publisher filter helpers for catalog display.
# ABOUTME: Display-only views; they never reorder or mutate the catalog.

from collections.abc import Iterable

from shelfkeeper.core.types import Book

ALL_PUBLISHERS = "All"


def _clean_publisher(book: Book) -> str:
    return (book.publisher or "").strip()


def publisher_choices(books: Iterable[Book]) -> list[str]:
    """Return "All" followed by each distinct publisher in first-seen order.

    Publishers are trimmed and compared case-sensitively; blank ones are
    skipped.
    """
    choices = [ALL_PUBLISHERS]
    seen: set[str] = set()
    for book in books:
        name = _clean_publisher(book)
        if name and name not in seen:
            seen.add(name)
            choices.append(name)
    return choices


def filter_by_publisher(books: Iterable[Book], publisher: str) -> list[Book]:
    """Return the books from a given publisher, keeping their order."""
    wanted = publisher.strip()
    if wanted == ALL_PUBLISHERS:
        return list(books)
    return [book for book in books if _clean_publisher(book) == wanted]
