# ABOUTME: SnapshotGateway protocol for persisting Shelfkeeper collections.
# ABOUTME: Any key-value store that can round-trip a list of dicts implements this.

from typing import Any, Protocol, runtime_checkable

BOOKS_COLLECTION = "books"
LOANS_COLLECTION = "loans"


@runtime_checkable
class SnapshotGateway(Protocol):
    """Protocol for the durable store behind the library.

    Each named collection is saved and loaded as a full snapshot. load
    returns an empty list for a collection that was never saved.
    Implementations raise PersistenceError on failure.
    """

    def load(self, name: str) -> list[dict[str, Any]]: ...

    def save(self, name: str, items: list[dict[str, Any]]) -> None: ...
