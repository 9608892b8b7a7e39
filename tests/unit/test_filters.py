# ABOUTME: Unit tests for the publisher filter helpers.
# ABOUTME: Choices are trimmed, case-sensitive, and never reorder the catalog.

from shelfkeeper.core.filters import ALL_PUBLISHERS, filter_by_publisher, publisher_choices
from shelfkeeper.core.types import Book, BookDetails


def _book(book_id: str, publisher: str | None) -> Book:
    return Book(id=book_id, details=BookDetails(title=book_id, author="A", publisher=publisher))


class TestPublisherChoices:
    """Tests for publisher_choices."""

    def test_all_comes_first(self) -> None:
        assert publisher_choices([]) == [ALL_PUBLISHERS]

    def test_distinct_trimmed_in_first_seen_order(self) -> None:
        books = [
            _book("a", "Penguin"),
            _book("b", " Harcourt "),
            _book("c", "Penguin"),
            _book("d", "Harcourt"),
        ]
        assert publisher_choices(books) == ["All", "Penguin", "Harcourt"]

    def test_case_sensitive(self) -> None:
        books = [_book("a", "Penguin"), _book("b", "penguin")]
        assert publisher_choices(books) == ["All", "Penguin", "penguin"]

    def test_blank_publishers_skipped(self) -> None:
        books = [_book("a", None), _book("b", ""), _book("c", "   ")]
        assert publisher_choices(books) == ["All"]


class TestFilterByPublisher:
    """Tests for filter_by_publisher."""

    def test_all_returns_everything(self) -> None:
        books = [_book("a", "Penguin"), _book("b", None)]
        assert filter_by_publisher(books, ALL_PUBLISHERS) == books

    def test_matches_trimmed_names_in_order(self) -> None:
        books = [_book("a", "Penguin "), _book("b", "Tor"), _book("c", "Penguin")]
        result = filter_by_publisher(books, "Penguin")
        assert [book.id for book in result] == ["a", "c"]

    def test_no_match(self) -> None:
        assert filter_by_publisher([_book("a", "Tor")], "Penguin") == []
