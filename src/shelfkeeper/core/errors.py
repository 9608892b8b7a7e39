# ABOUTME: Exception types for Shelfkeeper.
# ABOUTME: LibraryError subclasses are user-facing rejections; PersistenceError is fatal.


class LibraryError(Exception):
    """Base class for requests rejected by the library model.

    Raised before any state changes, so callers can report the message and
    carry on.
    """


class InvalidReferenceError(LibraryError):
    """Raised when a request names a book that is not in the catalog."""


class AlreadyLoanedError(LibraryError):
    """Raised when a loan is requested for a book that is already on loan."""


class InvalidDurationError(LibraryError):
    """Raised when a loan duration is not a whole number of weeks in range."""


class BookOnLoanError(LibraryError):
    """Raised when deleting a book that is currently on loan."""


class NoSelectionError(LibraryError):
    """Raised when edit or delete is requested with no book selected."""


class NotOnLoanError(LibraryError):
    """Raised when returning a book that has no active loan."""


class PersistenceError(Exception):
    """Raised when a snapshot cannot be read from or written to storage."""
